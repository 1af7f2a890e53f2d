"""Path inspection CLI commands."""

import argparse
import dataclasses
import json

import yaml

from sonic_pi_paths.errors import ToolNotFoundError
from sonic_pi_paths.host import Host
from sonic_pi_paths.table import ACCESSORS, path_table, resolve


def _host(args: argparse.Namespace) -> Host:
    """Snapshot the live process, optionally under another platform id."""
    host = Host.current()
    if args.platform:
        host = dataclasses.replace(host, platform_id=args.platform)
    return host


def cmd_os(args: argparse.Namespace) -> int:
    host = _host(args)
    print(host.family.value)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    if args.name not in ACCESSORS:
        print(f"ERROR: Unknown path '{args.name}'")
        return 1

    try:
        print(resolve(args.name, _host(args)))
    except ToolNotFoundError as exc:
        print(f"ERROR: {exc}")
        return 1
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    table = path_table(_host(args), include_tools=not args.skip_tools)

    if args.format == "json":
        print(json.dumps(table, indent=2))
        return 0
    if args.format == "yaml":
        print(yaml.safe_dump(table, sort_keys=False, default_flow_style=False), end="")
        return 0

    width = max(len(name) for name in table)
    print(f"\n  {'Name':<{width}}  Path")
    print(f"  {'─' * (width + 40)}")
    for name, value in table.items():
        print(f"  {name:<{width}}  {value if value is not None else '(not found)'}")
    print(f"\n  {len(table)} path(s)")
    return 0
