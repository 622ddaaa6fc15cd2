"""Attached-device retrieval, name overrides and rendering."""

from orbihelper.devices.client import DeviceClient
from orbihelper.devices.models import AttachedDevices, Device
from orbihelper.devices.overrides import OverrideResolver, resolve_overrides
from orbihelper.devices.pipeline import get_attached_devices
from orbihelper.devices.render import (
    DEFAULT_FIELDS,
    DeviceField,
    render_json,
    render_plain_text,
    render_simple,
    render_table,
    table_rows,
)

__all__ = [
    "DeviceClient",
    "AttachedDevices",
    "Device",
    "OverrideResolver",
    "resolve_overrides",
    "get_attached_devices",
    "DEFAULT_FIELDS",
    "DeviceField",
    "render_json",
    "render_plain_text",
    "render_simple",
    "render_table",
    "table_rows",
]
