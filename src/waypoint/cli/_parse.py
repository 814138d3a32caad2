"""``waypoint parse`` — show how a URL decomposes against the route table."""

import argparse
import sys

from waypoint.cli._resolve import resolve_serializer
from waypoint.errors import ConfigurationError


def run_parse(args: argparse.Namespace) -> None:
    """Print one line per segment, then the re-serialized URL.

    Fallback segments are marked ``-`` in the VIEW column.
    """
    try:
        serializer = resolve_serializer(args.links)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    path = serializer.parse(args.url)
    for index, segment in enumerate(path):
        view = "-" if segment.is_fallback else getattr(segment.view, "__name__", None) or str(segment.view)
        data = "" if segment.data is None else " " + ", ".join(f"{k}={v!r}" for k, v in segment.data.items())
        print(f"{index}  {segment.name}  id={segment.id!r}  view={view}{data}")

    print(f"=> {serializer.serialize(path)}")
