"""``waypoint routes`` — list normalized routes in match order."""

import argparse
import sys

from waypoint.cli._resolve import resolve_serializer
from waypoint.errors import ConfigurationError


def _view_name(view: object) -> str:
    return getattr(view, "__name__", None) or str(view)


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table for ``args.links``.

    Columns are NAME, PATH, VIEW, and the STATIC/DATA part counts used
    for specificity ordering.
    """
    try:
        serializer = resolve_serializer(args.links)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    table = serializer.table
    if not table:
        print("No routes configured.")
        return

    rows = [
        (t.name, t.path, _view_name(t.view), str(t.static_parts), str(t.data_parts))
        for t in table
    ]
    headers = ("NAME", "PATH", "VIEW", "STATIC", "DATA")
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(headers)]

    fmt = "  ".join(f"{{:<{w}}}" for w in widths)
    print(fmt.format(*headers).rstrip())
    print("-" * min(sum(widths) + 2 * (len(widths) - 1), 80))
    for row in rows:
        print(fmt.format(*row).rstrip())
