"""Wayfinder CLI — inspect preload manifests.

Entry point registered as ``wayfinder`` in ``pyproject.toml``::

    [project.scripts]
    wayfinder = "wayfinder.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wayfinder`` command."""
    parser = argparse.ArgumentParser(
        prog="wayfinder",
        description="Wayfinder: route resolution for navigation and preloading.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wayfinder routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes in a preload manifest")
    routes_parser.add_argument("manifest", help="Path to a JSON preload manifest")

    # -- wayfinder match --------------------------------------------------
    match_parser = subparsers.add_parser(
        "match",
        help="Show which route and sub-calls a path would preload",
    )
    match_parser.add_argument("manifest", help="Path to a JSON preload manifest")
    match_parser.add_argument("path", help="Request path (e.g. /users/42)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wayfinder.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from wayfinder.cli._match import run_match

        run_match(args)
