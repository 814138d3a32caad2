"""Waypoint CLI — inspect a link configuration from the command line.

Entry point registered as ``waypoint`` in ``pyproject.toml``::

    [project.scripts]
    waypoint = "waypoint.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypoint`` command."""
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Waypoint — URL-to-route matching for navigation stacks.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log table builds and fallback segments to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypoint routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes in match order")
    routes_parser.add_argument(
        "links",
        help="Import string (e.g. myapp.links:links)",
    )

    # -- waypoint parse ----------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Parse a URL into segments")
    parse_parser.add_argument(
        "links",
        help="Import string (e.g. myapp.links:links)",
    )
    parse_parser.add_argument("url", help="Browser path (e.g. /users/42?tab=bio)")

    # -- waypoint format ---------------------------------------------------
    format_parser = subparsers.add_parser("format", help="Format text as a URL part")
    format_parser.add_argument("text", nargs="+", help="Text to format")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "routes":
        from waypoint.cli._routes import run_routes

        run_routes(args)
    elif args.command == "parse":
        from waypoint.cli._parse import run_parse

        run_parse(args)
    elif args.command == "format":
        from waypoint.routing.formatting import format_url_part

        print(format_url_part(" ".join(args.text)))
