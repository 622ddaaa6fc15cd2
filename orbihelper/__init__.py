"""Orbi attached-devices helper.

Fetches the attached-device list from a Netgear Orbi router, applies
user-defined display-name overrides and renders the result as a table,
plain text, JSON or over a small HTTP server.

Library logging is disabled on import; the CLI entry point turns it back
on through :func:`configure_logging`.
"""

__version__ = "0.1.0"

import os
import sys

from loguru import logger as glogger

glogger.disable(__name__)

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str | None = None) -> None:
    """Send orbihelper logs to stderr.

    ``level`` wins over ``LOGURU_LEVEL``; with neither set, DEBUG is used.
    """
    level = level or os.getenv("LOGURU_LEVEL", "DEBUG")
    glogger.remove()
    glogger.add(sys.stderr, level=level, format=LOG_FORMAT)
    glogger.enable(__name__)


from orbihelper.config.models import Config  # noqa: E402
from orbihelper.config.store import ConfigStore  # noqa: E402
from orbihelper.devices.client import DeviceClient  # noqa: E402
from orbihelper.devices.models import AttachedDevices, Device  # noqa: E402
from orbihelper.devices.pipeline import get_attached_devices  # noqa: E402
from orbihelper.exceptions import (  # noqa: E402
    ConfigError,
    ConfigMissingError,
    ConfigParseError,
    ConfigPathUnresolvedError,
    ConfigWriteError,
    NetworkError,
    OrbiHelperError,
    ResponseParseError,
)

__all__ = [
    "glogger",
    "configure_logging",
    "Config",
    "ConfigStore",
    "DeviceClient",
    "AttachedDevices",
    "Device",
    "get_attached_devices",
    "OrbiHelperError",
    "ConfigError",
    "ConfigPathUnresolvedError",
    "ConfigMissingError",
    "ConfigParseError",
    "ConfigWriteError",
    "NetworkError",
    "ResponseParseError",
]
