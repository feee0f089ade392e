"""``deepnav routes`` — list mapped URL patterns.

Resolves an import string to a Navigator and prints every mapped
pattern with its kind and target, in the order they are tried.
"""

import argparse
import sys

from deepnav.cli._resolve import resolve_navigator


def run_routes(args: argparse.Namespace) -> None:
    """Print a KIND / PATTERN / TARGET table for ``args.navigator``."""
    try:
        navigator = resolve_navigator(args.navigator)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = navigator.routes
    if not routes:
        print("No routes mapped.")
        return

    rows = [(str(route.kind), route.pattern, route.target_name) for route in routes]

    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_kind}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("KIND", "PATTERN", "TARGET"))
    sep_len = max_kind + max_pattern + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for kind, pattern, target in rows:
        print(fmt.format(kind, pattern, target))
