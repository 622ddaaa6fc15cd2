"""Exception hierarchy for the fetch, override and render pipeline."""

from __future__ import annotations

from pathlib import Path


class OrbiHelperError(Exception):
    """Base exception for all orbihelper errors."""


class ConfigError(OrbiHelperError):
    """Base exception for configuration file problems."""


class ConfigPathUnresolvedError(ConfigError):
    """The OS could not supply a per-user config directory."""


class ConfigMissingError(ConfigError):
    """No config file exists at the expected location."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No file exists at {path}")


class ConfigParseError(ConfigError):
    """Config file content is not valid TOML or has the wrong shape."""


class ConfigWriteError(ConfigError):
    """Config file or its directory could not be written."""


class NetworkError(OrbiHelperError):
    """Request to the router failed at transport or HTTP level."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ResponseParseError(OrbiHelperError):
    """Router response is not JSON or does not match the device list shape."""
