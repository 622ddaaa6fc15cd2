"""Shared fixtures for the orbihelper test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from orbihelper.config.models import Config
from orbihelper.config.store import ConfigStore
from orbihelper.devices.models import AttachedDevices, Device

# ── device fixtures ───────────────────────────────────────────────────


@pytest.fixture()
def sample_device():
    """Factory fixture returning a Device with customizable fields."""

    def _make(**kwargs):
        defaults = {
            "mac": "AA:BB:CC:DD:EE:01",
            "kind": "WSTA",
            "model": "Pixel 8",
            "name": "android-1234",
            "ip": "192.168.1.10",
            "connection_type": "5GHz",
            "connected_orbi": "Orbi Router",
            "connected_orbi_mac": "AA:BB:CC:00:00:01",
        }
        defaults.update(kwargs)
        return Device(**defaults)

    return _make


@pytest.fixture()
def sample_attached_devices(sample_device):
    """Factory fixture returning AttachedDevices with one satellite and three devices."""

    def _make(devices=None, satellites=None):
        if satellites is None:
            satellites = [
                sample_device(
                    mac="AA:BB:CC:00:00:02",
                    kind="SATELLITE",
                    model="RBS50",
                    name="Orbi Satellite",
                    ip="192.168.1.2",
                    connection_type="wireless",
                    backhaul_status="Good",
                ),
            ]
        if devices is None:
            devices = [
                sample_device(),
                sample_device(mac="AA:BB:CC:DD:EE:02", name="Laptop", ip="10.0.0.5", model="MacBook"),
                sample_device(
                    mac="AA:BB:CC:DD:EE:03",
                    name="tv",
                    ip="192.168.1.30",
                    kind="WIRED",
                    connection_type="wired",
                    connected_orbi="Orbi Satellite",
                ),
            ]
        return AttachedDevices(satellites=satellites, devices=devices)

    return _make


@pytest.fixture()
def raw_device_payload():
    """Factory fixture returning a router-style device dict (camelCase keys)."""

    def _make(**overrides):
        payload = {
            "mac": "AA:BB:CC:DD:EE:01",
            "type": "WSTA",
            "model": "Pixel 8",
            "name": "android-1234",
            "ip": "192.168.1.10",
            "connectionType": "5GHz",
            "connectedOrbi": "Orbi Router",
            "connectedOrbiMac": "AA:BB:CC:00:00:01",
            "connectionImg": "wifi.png",
            "backhaulStatusStyle": "",
            "backhaulStatus": "",
            "category": "phone",
            "status": 1,
            "satType": 0,
            "ledStatus": 0,
            "ledBrightness": 0,
            "ledSync": 0,
            "voiceReg": "",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture()
def raw_response_body(raw_device_payload):
    """JSON body as returned by the router."""
    body = {
        "satellites": [
            raw_device_payload(mac="AA:BB:CC:00:00:02", type="SATELLITE", name="Orbi Satellite", ip="192.168.1.2"),
        ],
        "devices": [
            raw_device_payload(),
            raw_device_payload(mac="AA:BB:CC:DD:EE:02", name="Laptop", ip="10.0.0.5"),
        ],
    }
    return json.dumps(body)


# ── config fixtures ───────────────────────────────────────────────────


@pytest.fixture()
def config_path(tmp_path: Path) -> Path:
    """Config file location inside a not-yet-existing directory."""
    return tmp_path / "orbi-helper" / "config.toml"


@pytest.fixture()
def config_store(config_path: Path) -> ConfigStore:
    return ConfigStore(config_path)


@pytest.fixture()
def sample_config():
    """Factory fixture returning a populated Config."""

    def _make(**overrides):
        defaults = dict(
            username="admin",
            password="s3cret",
            device_name_overrides={
                "AA:BB:CC:DD:EE:01": "Pixel",
                "tv": "Living room TV",
            },
        )
        defaults.update(overrides)
        return Config(**defaults)

    return _make
