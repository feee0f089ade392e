"""deepnav CLI — inspect and try out a navigator's URL map.

Entry point registered as ``deepnav`` in ``pyproject.toml``::

    [project.scripts]
    deepnav = "deepnav.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``deepnav`` command."""
    parser = argparse.ArgumentParser(
        prog="deepnav",
        description="deepnav — navigate by URL.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log match attempts to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- deepnav routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List mapped URL patterns")
    routes_parser.add_argument(
        "navigator",
        help="Import string (e.g. myapp.navigation:navigator)",
    )

    # -- deepnav match ----------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a URL against a navigator")
    match_parser.add_argument(
        "navigator",
        help="Import string (e.g. myapp.navigation:navigator)",
    )
    match_parser.add_argument("url", help="URL to match (e.g. myapp://user/123)")
    match_parser.add_argument(
        "--kind",
        choices=("navigable", "handler"),
        default=None,
        help="Only search navigables or open handlers",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from deepnav.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from deepnav.cli._match import run_match

        run_match(args)
