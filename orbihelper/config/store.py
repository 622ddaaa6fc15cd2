"""File-backed configuration store.

The config lives in ``config.toml`` inside the per-user config directory
reported by ``platformdirs``. Every mutator is a plain read-modify-write
without file locking: two concurrent writers can lose one update.
"""

from __future__ import annotations

import asyncio
import os
import tomllib
from pathlib import Path

import tomli_w
from loguru import logger
from platformdirs import user_config_dir
from pydantic import ValidationError

from orbihelper.config.models import Config
from orbihelper.exceptions import (
    ConfigMissingError,
    ConfigParseError,
    ConfigPathUnresolvedError,
    ConfigWriteError,
)

APP_NAME = "orbi-helper"
APP_AUTHOR = "rfm"
CONFIG_FILE_NAME = "config.toml"
CONFIG_PATH_ENV = "ORBIHELPER_CONFIG"


class ConfigStore:
    """Load, save and mutate the configuration file.

    Args:
        path: Explicit config file path. When omitted, ``$ORBIHELPER_CONFIG``
            is used if set, otherwise the platform config directory.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path).expanduser() if path is not None else None

    def path(self) -> Path:
        """Return the expected config file path without checking that it exists."""
        if self._path is not None:
            return self._path
        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            return Path(env_path).expanduser()
        try:
            config_dir = user_config_dir(APP_NAME, APP_AUTHOR)
        except (OSError, KeyError, RuntimeError) as e:
            raise ConfigPathUnresolvedError(f"config dir not found: {e}") from e
        if not config_dir:
            raise ConfigPathUnresolvedError("config dir not found")
        return Path(config_dir) / CONFIG_FILE_NAME

    def locate(self) -> Path:
        """Return the config file path.

        Raises:
            ConfigPathUnresolvedError: No config directory is available.
            ConfigMissingError: The file does not exist yet.
        """
        path = self.path()
        if not path.is_file():
            raise ConfigMissingError(path)
        return path

    def load(self) -> Config:
        """Read and validate the config file."""
        path = self.locate()
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigParseError(f"Cannot read {path}: {e}") from e

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(f"Invalid TOML in {path}: {e}") from e

        try:
            config = Config.model_validate(data)
        except ValidationError as e:
            raise ConfigParseError(f"Invalid config in {path}: {e}") from e

        logger.debug(f"Loaded config from {path} ({len(config.device_name_overrides)} overrides)")
        return config

    def save(self, config: Config) -> Path:
        """Serialize the full config and overwrite the file, creating its directory.

        The file holds the router password in clear text, so it is restricted
        to owner read/write before any content is written.
        """
        path = self.path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(mode=0o600, exist_ok=True)
            path.chmod(0o600)
            path.write_text(tomli_w.dumps(config.to_toml_dict()), encoding="utf-8")
        except OSError as e:
            raise ConfigWriteError(f"Cannot write {path}: {e}") from e
        logger.debug(f"Saved config to {path}")
        return path

    async def load_async(self) -> Config:
        """Async wrapper around :meth:`load` running the file I/O in a worker thread."""
        return await asyncio.to_thread(self.load)

    async def save_async(self, config: Config) -> Path:
        """Async wrapper around :meth:`save`."""
        return await asyncio.to_thread(self.save, config)

    # ── mutators ──────────────────────────────────────────────────────

    def _load_or_default(self) -> Config:
        try:
            return self.load()
        except ConfigMissingError:
            logger.info("No config file yet, starting from an empty config")
            return Config()

    def set_username(self, username: str) -> Path:
        config = self._load_or_default()
        config.username = username
        return self.save(config)

    def set_password(self, password: str) -> Path:
        config = self._load_or_default()
        config.password = password
        return self.save(config)

    def set_override(self, key: str, replacement: str) -> Path:
        """Map ``key`` (MAC or original name) to ``replacement``."""
        config = self._load_or_default()
        config.device_name_overrides[key] = replacement
        return self.save(config)

    def clear_override(self, key: str) -> bool:
        """Remove the override for ``key``. Returns False if there was none."""
        config = self._load_or_default()
        if config.device_name_overrides.pop(key, None) is None:
            logger.info(f"No override for {key!r}, nothing to clear")
            return False
        self.save(config)
        return True
