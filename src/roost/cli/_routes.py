"""``roost routes`` — list mounted routes.

Resolves an import string to a roost App and prints all mounted
routes with method, path, and action info.
"""

import argparse
import sys

from roost.cli._resolve import resolve_app
from roost.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """List mounted routes for a roost app.

    Resolves ``args.app`` to an App instance, freezes it, and prints
    a table of METHOD, PATH, and action name.
    """
    try:
        app = resolve_app(args.app)
        routes = app.routes
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not routes:
        print("No routes mounted.")
        return

    # Build rows: (method, path, action_name)
    rows: list[tuple[str, str, str]] = []
    for route in routes:
        action_name = f"{route.action.__module__}.{route.action.__qualname__}"
        if route.name is not None:
            action_name = f"{action_name} ({route.name})"
        rows.append((route.method, route.path, action_name))

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "ACTION"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, action_name in rows:
        print(fmt.format(method, path, action_name))
