"""CLI entry point for the attached-devices HTTP server (standalone-capable)."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from orbihelper.config.store import ConfigStore
from orbihelper.devices.client import DeviceClient
from orbihelper.server.app import ATTACHED_DEVICES_ROUTE, make_server


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the HTTP server."""
    parser = argparse.ArgumentParser(
        prog="orbihelper serve",
        description="Serve the attached-devices list over HTTP (JSON or plain-text table).",
    )
    parser.add_argument("--bind", default="127.0.0.1", help="Listen address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=3030, help="Listen port (default: 3030)")
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
    """Main entry point for the server CLI."""
    parsed = parse_args(args)

    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    store = ConfigStore(parsed.config)
    client = DeviceClient(timeout=parsed.timeout)

    try:
        server = make_server(store, client, host=parsed.bind, port=parsed.port)
    except OSError as e:
        print(f"Error: cannot listen on {parsed.bind}:{parsed.port}: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info(f"Serving http://{parsed.bind}:{parsed.port}{ATTACHED_DEVICES_ROUTE}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Stopped.")
    finally:
        server.server_close()
