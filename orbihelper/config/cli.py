"""CLI entry point for inspecting and editing the config file (standalone-capable).

Examples:
  orbihelper config set-username admin
  orbihelper config set-password <PW>
  orbihelper config set-override aa:bb:cc:dd:ee:ff "Living room TV"
  orbihelper config clear-override "android-1234"
  orbihelper config dump --show-password
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger
from tabulate import tabulate

from orbihelper.config.models import Config
from orbihelper.config.store import ConfigStore
from orbihelper.exceptions import OrbiHelperError

PASSWORD_MASK = "********"


def cmd_dump(store: ConfigStore, args: argparse.Namespace) -> None:
    """Print credentials and overrides."""
    config: Config = store.load()
    password = config.password if args.show_password else PASSWORD_MASK
    print(f"  Username:    {config.username}")
    print(f"  Password:    {password}")
    print(f"  Router host: {config.router_host}")

    print("\n=== Device name overrides ===")
    if config.device_name_overrides:
        rows = sorted(config.device_name_overrides.items())
        print(tabulate(rows, headers=["Name or MAC", "Replacement"], tablefmt="grid", disable_numparse=True))
    else:
        print("  No overrides configured")


def cmd_get_path(store: ConfigStore, args: argparse.Namespace) -> None:
    print(store.path())


def cmd_set_username(store: ConfigStore, args: argparse.Namespace) -> None:
    path = store.set_username(args.value)
    print(f"Username saved to {path}")


def cmd_set_password(store: ConfigStore, args: argparse.Namespace) -> None:
    path = store.set_password(args.value)
    print(f"Password saved to {path}")


def cmd_set_override(store: ConfigStore, args: argparse.Namespace) -> None:
    store.set_override(args.key, args.replacement)
    print(f"Override set: {args.key} -> {args.replacement}")


def cmd_clear_override(store: ConfigStore, args: argparse.Namespace) -> None:
    if store.clear_override(args.key):
        print(f"Override cleared: {args.key}")
    else:
        print(f"No override for {args.key}")


COMMANDS = {
    "dump": cmd_dump,
    "get-path": cmd_get_path,
    "set-username": cmd_set_username,
    "set-password": cmd_set_password,
    "set-override": cmd_set_override,
    "clear-override": cmd_clear_override,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for config management."""
    parser = argparse.ArgumentParser(
        prog="orbihelper config",
        description="Inspect and edit credentials and device name overrides",
    )
    parser.add_argument("--config", help="Config file path (default: platform config dir)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    dump = subparsers.add_parser("dump", help="Show the current configuration")
    dump.add_argument("--show-password", action="store_true", help="Print the password in clear text")

    subparsers.add_parser("get-path", help="Print the config file path")

    set_username = subparsers.add_parser("set-username", help="Store the router username")
    set_username.add_argument("value", help="Router admin username")

    set_password = subparsers.add_parser("set-password", help="Store the router password")
    set_password.add_argument("value", help="Router admin password")

    set_override = subparsers.add_parser("set-override", help="Set a display name override")
    set_override.add_argument("key", help="Device MAC address or original name")
    set_override.add_argument("replacement", help="Display name to show instead")

    clear_override = subparsers.add_parser("clear-override", help="Remove a display name override")
    clear_override.add_argument("key", help="Device MAC address or original name")

    return parser


def main(args: list[str] | None = None) -> None:
    """Main entry point for the config CLI."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        sys.exit(1)

    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    store = ConfigStore(parsed.config)
    try:
        COMMANDS[parsed.command](store, parsed)
    except OrbiHelperError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)
