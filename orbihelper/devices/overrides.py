"""Apply configured display-name overrides to fetched devices."""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from orbihelper.devices.models import AttachedDevices, Device


class OverrideResolver:
    """Rename devices from an override mapping.

    Keys are matched exactly (case-sensitive). A MAC-keyed entry always
    wins over a name-keyed one, so a device renamed to another device's
    original name still resolves through its own MAC.
    """

    def __init__(self, overrides: Mapping[str, str]) -> None:
        self.overrides = overrides

    def lookup(self, device: Device) -> str | None:
        """Return the replacement name for ``device``, or None."""
        by_mac = self.overrides.get(device.mac)
        if by_mac is not None:
            return by_mac
        return self.overrides.get(device.name)

    def apply(self, attached: AttachedDevices) -> int:
        """Rewrite ``name`` in place for ``attached.devices``; satellites are left alone.

        Returns the number of renamed devices.
        """
        renamed = 0
        for device in attached.devices:
            replacement = self.lookup(device)
            if replacement is None:
                continue
            logger.debug(f"Override {device.mac} ({device.name!r}) -> {replacement!r}")
            device.name = replacement
            renamed += 1
        return renamed


def resolve_overrides(attached: AttachedDevices, overrides: Mapping[str, str]) -> AttachedDevices:
    """Apply ``overrides`` to ``attached`` in place and return it."""
    OverrideResolver(overrides).apply(attached)
    return attached
