"""``deepnav match`` — show which pattern a URL resolves to.

Prints the matched kind, pattern, and target followed by the extracted
placeholder values as JSON. Exits with status 1 when nothing matches.
"""

import argparse
import json
import sys

from deepnav.cli._resolve import resolve_navigator
from deepnav.errors import DeepNavError
from deepnav.routing.route import RouteKind


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.url`` against the navigator at ``args.navigator``."""
    try:
        navigator = resolve_navigator(args.navigator)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    kind = RouteKind(args.kind) if args.kind else None
    try:
        found = navigator.match(args.url, kind)
    except DeepNavError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if found is None:
        print(f"No match for {args.url!r}", file=sys.stderr)
        raise SystemExit(1)

    route = found.route
    print(f"{route.kind}  {route.pattern}  {route.target_name}")
    print(json.dumps(found.values, indent=2, sort_keys=True))
