"""CLI entry point for listing attached devices (standalone-capable)."""

from __future__ import annotations

import argparse
import asyncio
import sys

from loguru import logger

from orbihelper.config.store import ConfigStore
from orbihelper.devices.client import DeviceClient
from orbihelper.devices.pipeline import get_attached_devices
from orbihelper.devices.render import DeviceField, render_json, render_simple, render_table
from orbihelper.exceptions import OrbiHelperError

OUTPUT_FORMATS = ("table", "simple", "json")


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the devices command."""
    parser = argparse.ArgumentParser(
        prog="orbihelper devices",
        description="List devices attached to the Orbi router, with name overrides applied.",
    )
    parser.add_argument(
        "-f",
        "--output-format",
        choices=OUTPUT_FORMATS,
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "-d",
        "--device-fields",
        nargs="+",
        type=DeviceField,
        choices=list(DeviceField),
        metavar="FIELD",
        default=[],
        help="Table columns: " + ", ".join(f.value for f in DeviceField) + " (default: name ip connection kind)",
    )
    parser.add_argument("--config", help="Config file path (default: platform config dir)")
    parser.add_argument("--timeout", type=float, help="Router request timeout in seconds (default: none)")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> None:
    """Main entry point for the devices CLI."""
    parsed = parse_args(args)

    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    store = ConfigStore(parsed.config)
    client = DeviceClient(timeout=parsed.timeout)

    try:
        attached = asyncio.run(get_attached_devices(store, client))
    except OrbiHelperError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)

    if parsed.output_format == "simple":
        print(render_simple(attached))
    elif parsed.output_format == "json":
        print(render_json(attached, indent=2))
    else:
        print(render_table(attached, parsed.device_fields))
