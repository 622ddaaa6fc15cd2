"""Table, simple-list and JSON renderers for attached devices.

Renderers are pure: they read an :class:`AttachedDevices` value and
never modify it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from tabulate import tabulate

from orbihelper.devices.models import AttachedDevices, Device


class DeviceField(str, Enum):
    """Selectable table column; the value is the CLI spelling."""

    MAC = "mac"
    KIND = "kind"
    MODEL = "model"
    NAME = "name"
    IP = "ip"
    ORBI = "orbi"
    CONNECTION = "connection"

    @property
    def label(self) -> str:
        """Static header label for table output."""
        return FIELD_LABELS[self]

    def value_of(self, device: Device) -> str:
        return _FIELD_GETTERS[self](device)


FIELD_LABELS: dict[DeviceField, str] = {
    DeviceField.MAC: "MAC",
    DeviceField.KIND: "Type",
    DeviceField.MODEL: "Model",
    DeviceField.NAME: "Name",
    DeviceField.IP: "IP",
    DeviceField.ORBI: "Satellite",
    DeviceField.CONNECTION: "Connection",
}

_FIELD_GETTERS: dict[DeviceField, Callable[[Device], str]] = {
    DeviceField.MAC: lambda d: d.mac,
    DeviceField.KIND: lambda d: d.kind,
    DeviceField.MODEL: lambda d: d.model,
    DeviceField.NAME: lambda d: d.name,
    DeviceField.IP: lambda d: d.ip,
    DeviceField.ORBI: lambda d: d.connected_orbi,
    DeviceField.CONNECTION: lambda d: d.connection_type,
}

DEFAULT_FIELDS: tuple[DeviceField, ...] = (
    DeviceField.NAME,
    DeviceField.IP,
    DeviceField.CONNECTION,
    DeviceField.KIND,
)

# Pure ASCII, safe for HTTP text/plain bodies
TABLE_FORMAT = "grid"


def table_rows(
    attached: AttachedDevices, fields: Sequence[DeviceField] = ()
) -> tuple[list[str], list[list[str]]]:
    """Return ``(header, rows)`` for the selected fields; empty selects the defaults."""
    selected = list(fields) or list(DEFAULT_FIELDS)
    header = [f.label for f in selected]
    rows = [[f.value_of(device) for f in selected] for device in attached.devices]
    return header, rows


def render_table(
    attached: AttachedDevices,
    fields: Sequence[DeviceField] = (),
    tablefmt: str = TABLE_FORMAT,
) -> str:
    header, rows = table_rows(attached, fields)
    return tabulate(rows, headers=header, tablefmt=tablefmt, disable_numparse=True)


def render_simple(attached: AttachedDevices) -> str:
    """One ``<name>: <ip>`` line per device."""
    return "\n".join(f"{d.name}: {d.ip}" for d in attached.devices)


def render_json(attached: AttachedDevices, indent: int | None = None) -> str:
    """Serialize the whole structure using the router's wire field names."""
    return attached.model_dump_json(by_alias=True, indent=indent)


def render_plain_text(attached: AttachedDevices) -> str:
    """Default-field table used as the ``text/plain`` HTTP body."""
    return render_table(attached) + "\n"
