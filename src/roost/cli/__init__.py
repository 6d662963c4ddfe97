"""Roost CLI — route name resolution and route listings.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — convention-named actions for Python web applications.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- roost resolve ----------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Print the method and path a route name resolves to"
    )
    resolve_parser.add_argument("name", help="Route name (e.g. Api::V1::Users::Show)")
    resolve_parser.add_argument(
        "--nested",
        action="store_true",
        help="Treat the segment before the resource as a parent resource",
    )
    resolve_parser.add_argument("--prefix", default="", help="Path prefix (e.g. /admin)")

    # -- roost routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the routes of an app")
    routes_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:app)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "resolve":
        from roost.cli._name import run_resolve

        run_resolve(args)
    elif args.command == "routes":
        from roost.cli._routes import run_routes

        run_routes(args)
