"""``roost resolve`` — print the pattern a route name resolves to."""

import argparse
import sys

from roost.errors import ConfigurationError
from roost.routing.resolver import resolve_name


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.name`` and print ``METHOD PATH``.

    Exits with status 1 and an ``Error:`` line on stderr when the name
    cannot be resolved.
    """
    try:
        pattern = resolve_name(args.name, nested=args.nested, prefix=args.prefix)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"{pattern.method} {pattern.path}")
