"""Command-line inspector for Sonic Pi paths.

Usage:
    sonic-pi-paths os
    sonic-pi-paths show <name>
    sonic-pi-paths list [--format text|json|yaml] [--skip-tools]
    sonic-pi-paths --platform darwin list
"""

import argparse
import logging
import sys

from sonic_pi_paths.cli.paths import cmd_list, cmd_os, cmd_show
from sonic_pi_paths.errors import UnsupportedPlatformError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sonic-pi-paths",
        description="Show where Sonic Pi looks for its files",
    )
    parser.add_argument(
        "--platform", default=None,
        help="Platform identifier to resolve for (default: this machine)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log tool lookups",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("os", help="Show the detected OS family")

    show = sub.add_parser("show", help="Show a single path")
    show.add_argument("name", help="Accessor name, e.g. synthdef_path")

    ls = sub.add_parser("list", help="Show every path")
    ls.add_argument(
        "--format", choices=("text", "json", "yaml"), default="text",
        help="Output format (default: text)",
    )
    ls.add_argument(
        "--skip-tools", action="store_true",
        help="Skip lookups that check for bundled binaries",
    )

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    logging.basicConfig(
        format="%(levelname)s:%(name)s:%(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    dispatch = {
        "os": cmd_os,
        "show": cmd_show,
        "list": cmd_list,
    }

    try:
        return dispatch[args.command](args)
    except UnsupportedPlatformError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
