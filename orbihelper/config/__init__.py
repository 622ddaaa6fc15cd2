"""Configuration file handling: credentials and display-name overrides."""

from orbihelper.config.models import DEFAULT_ROUTER_HOST, Config
from orbihelper.config.store import ConfigStore

__all__ = [
    "Config",
    "ConfigStore",
    "DEFAULT_ROUTER_HOST",
]
