"""Tests for ``waypoint routes`` and ``waypoint parse`` output."""

import sys
import types

import pytest

from waypoint.cli import main
from waypoint.routing.route import RouteDefinition


class UserView:
    pass


@pytest.fixture(autouse=True)
def _fake_links_module(monkeypatch: pytest.MonkeyPatch) -> None:
    mod = types.ModuleType("_fake_cli_links")
    mod.links = [  # type: ignore[attr-defined]
        RouteDefinition("home", "HomeView"),
        RouteDefinition("user", UserView, path="/users/:id"),
        RouteDefinition("settings", "SettingsView", path="/users/settings"),
    ]
    mod.empty = []  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_cli_links", mod)


class TestRoutesCommand:
    def test_lists_in_match_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_cli_links"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["NAME", "PATH", "VIEW", "STATIC", "DATA"]
        assert lines[2].split() == ["settings", "users/settings", "SettingsView", "2", "0"]
        assert lines[3].split() == ["user", "users/:id", "UserView", "1", "1"]
        assert lines[4].split() == ["home", "home", "HomeView", "1", "0"]

    def test_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_cli_links:empty"])
        assert "No routes configured." in capsys.readouterr().out

    def test_bad_import(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_cli_links:missing"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestParseCommand:
    def test_prints_segments(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["parse", "_fake_cli_links", "/users/42?tab=bio"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert lines[0].startswith("0  42  id='42'  view=-")
        assert lines[1] == "1  user  id='users/42'  view=UserView id='42'"
        assert lines[3] == "=> /42/users/42/42"

    def test_bad_import(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["parse", "nonexistent_module_xyz", "/"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
