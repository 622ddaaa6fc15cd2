"""Pydantic model for the persisted configuration file."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

DEFAULT_ROUTER_HOST = "orbilogin.com"


class Config(BaseModel):
    """Router credentials plus display-name overrides.

    ``device_name_overrides`` maps either a MAC address or an original
    device name to the replacement display name.
    """

    username: str = ""
    password: str = ""
    device_name_overrides: dict[str, str] = Field(default_factory=dict)
    router_host: str = DEFAULT_ROUTER_HOST

    def to_toml_dict(self) -> dict[str, Any]:
        """Return the file representation; ``router_host`` only when non-default."""
        data = self.model_dump()
        if data["router_host"] == DEFAULT_ROUTER_HOST:
            del data["router_host"]
        return data
