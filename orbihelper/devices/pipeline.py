"""Fetch → override → result pipeline shared by the CLI and the HTTP server."""

from __future__ import annotations

from loguru import logger

from orbihelper.config.store import ConfigStore
from orbihelper.devices.client import DeviceClient
from orbihelper.devices.models import AttachedDevices
from orbihelper.devices.overrides import OverrideResolver


async def get_attached_devices(store: ConfigStore, client: DeviceClient) -> AttachedDevices:
    """Load the config, fetch the device list and apply name overrides.

    Nothing is cached: every call reads the config and queries the router.
    """
    config = await store.load_async()
    attached = await client.fetch(config)
    renamed = OverrideResolver(config.device_name_overrides).apply(attached)
    logger.info(f"Fetched {len(attached.devices)} devices ({renamed} renamed), {len(attached.satellites)} satellites")
    return attached
