"""Tests for waypoint.cli — CLI entrypoint and argument parsing."""

import pytest

from waypoint.cli import main


class TestCLIHelp:
    @pytest.mark.parametrize("argv", [["--help"], ["routes", "--help"], ["parse", "--help"], ["format", "--help"]])
    def test_help_exits_zero(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_links(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_parse_missing_url(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["parse", "myapp:links"])
        assert exc_info.value.code == 2

    def test_format_missing_text(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["format"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "waypoint" in captured.out


class TestCLIFormat:
    def test_joins_words(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["format", "Hello,", "World!!"])
        assert capsys.readouterr().out.strip() == "hello-world"
