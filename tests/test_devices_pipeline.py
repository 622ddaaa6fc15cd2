"""Tests for orbihelper.devices.pipeline.get_attached_devices."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from orbihelper.devices.client import DeviceClient
from orbihelper.devices.pipeline import get_attached_devices
from orbihelper.exceptions import ConfigMissingError, NetworkError


@pytest.fixture()
def mock_client(sample_attached_devices):
    """DeviceClient whose fetch() returns a fresh sample each call."""
    client = MagicMock(spec=DeviceClient)
    client.fetch = AsyncMock(side_effect=lambda config: sample_attached_devices())
    return client


class TestPipeline:
    def test_applies_overrides(self, config_store, sample_config, mock_client):
        config_store.save(sample_config())

        attached = asyncio.run(get_attached_devices(config_store, mock_client))

        assert [d.name for d in attached.devices] == ["Pixel", "Laptop", "Living room TV"]
        mock_client.fetch.assert_awaited_once()
        assert mock_client.fetch.call_args.args[0].username == "admin"

    def test_reads_config_every_call(self, config_store, sample_config, mock_client):
        """No caching: a config change is visible on the next call."""
        config_store.save(sample_config())
        asyncio.run(get_attached_devices(config_store, mock_client))

        config_store.set_override("Laptop", "MacBook")
        attached = asyncio.run(get_attached_devices(config_store, mock_client))

        assert attached.devices[1].name == "MacBook"
        assert mock_client.fetch.await_count == 2

    def test_missing_config(self, config_store, mock_client):
        with pytest.raises(ConfigMissingError):
            asyncio.run(get_attached_devices(config_store, mock_client))
        mock_client.fetch.assert_not_awaited()

    def test_network_error_propagates(self, config_store, sample_config, mock_client):
        config_store.save(sample_config())
        mock_client.fetch.side_effect = NetworkError("down")

        with pytest.raises(NetworkError):
            asyncio.run(get_attached_devices(config_store, mock_client))
