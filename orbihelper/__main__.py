"""Orchestrator CLI, dispatches to sub-CLIs.

Sub-commands:
  devices  List attached devices (table, simple or JSON output)
  config   Inspect and edit credentials and name overrides
  serve    HTTP server for the attached-devices list

Examples:
  orbihelper config set-username admin
  orbihelper config set-password <PW>

  orbihelper devices --device-fields name ip orbi

  orbihelper serve --port 3030
"""

from __future__ import annotations

import os
import sys

from tabulate import tabulate

from orbihelper import __version__, configure_logging, glogger
from orbihelper.config.store import ConfigStore
from orbihelper.exceptions import ConfigPathUnresolvedError

COMMANDS = {
    "devices": ("orbihelper.devices.cli", "List attached devices"),
    "config": ("orbihelper.config.cli", "Inspect and edit the config file"),
    "serve": ("orbihelper.server.cli", "Serve attached devices over HTTP"),
}


def _print_usage() -> None:
    print("usage: orbihelper <command> [options]\n")
    print("Available commands:")
    for cmd, (_, desc) in COMMANDS.items():
        print(f"  {cmd:14s}  {desc}")
    print("\nRun 'orbihelper <command> --help' for command-specific options.")


def _log_startup() -> None:
    try:
        config_path = str(ConfigStore().path())
    except ConfigPathUnresolvedError:
        config_path = "<unresolved>"

    rows = [
        ["orbihelper", __version__],
        ["config file", config_path],
        ["log level", os.getenv("LOGURU_LEVEL", "DEBUG")],
    ]
    glogger.opt(raw=True).debug("\n{}\n", tabulate(rows, tablefmt="simple_outline"))


def main() -> None:
    """Main entry point: dispatch to sub-CLI."""
    configure_logging()
    _log_startup()

    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        _print_usage()
        sys.exit(0 if len(sys.argv) >= 2 else 1)

    if sys.argv[1] == "--version":
        print(f"orbihelper {__version__}")
        sys.exit(0)

    command = sys.argv[1]
    if command not in COMMANDS:
        print(f"orbihelper: unknown command '{command}'\n", file=sys.stderr)
        _print_usage()
        sys.exit(1)

    module_path, _ = COMMANDS[command]

    from importlib import import_module

    module = import_module(module_path)
    module.main(sys.argv[2:])


if __name__ == "__main__":
    main()
