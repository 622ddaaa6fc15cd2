"""HTTP client for the router's attached-devices endpoint."""

from __future__ import annotations

import asyncio
from http.cookiejar import DefaultCookiePolicy

import requests
from loguru import logger
from pydantic import ValidationError

from orbihelper.config.models import Config
from orbihelper.devices.models import AttachedDevices
from orbihelper.exceptions import NetworkError, ResponseParseError

ATTACHED_DEVICES_PATH = "/ajax/get_attached_devices"


class DeviceClient:
    """Fetch and decode the attached-devices list.

    One ``requests.Session`` is created per client and never reconfigured
    afterwards; credentials travel per request, so the client can be
    shared by concurrent requests. The blocking call runs in a worker
    thread so :meth:`fetch` can be awaited.

    Args:
        timeout: Request timeout in seconds. ``None`` waits indefinitely.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout
        self._session = requests.Session()
        # Router cookies must not leak between requests sharing this session
        self._session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))

    @property
    def timeout(self) -> float | None:
        return self._timeout

    @staticmethod
    def endpoint(host: str) -> str:
        return f"http://{host}{ATTACHED_DEVICES_PATH}"

    async def fetch(self, config: Config) -> AttachedDevices:
        """POST to the router with Basic auth and decode the response.

        Raises:
            NetworkError: Transport failure or non-2xx status.
            ResponseParseError: Body is not JSON or not the expected shape.
        """
        body = await asyncio.to_thread(self._post, config)
        return self.decode(body)

    def _post(self, config: Config) -> str:
        url = self.endpoint(config.router_host)
        logger.debug(f"POST {url} as {config.username!r}")
        try:
            resp = self._session.post(
                url,
                auth=(config.username, config.password),
                headers={"Content-Length": "0"},
                timeout=self._timeout,
            )
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise NetworkError(f"POST {url} failed: {e}", status_code=status) from e
        except requests.RequestException as e:
            raise NetworkError(f"POST {url} failed: {e}") from e

        return resp.text

    @staticmethod
    def decode(body: str | bytes) -> AttachedDevices:
        """Decode a raw response body, ignoring unknown fields."""
        try:
            result = AttachedDevices.model_validate_json(body)
        except ValidationError as e:
            raise ResponseParseError(f"Unexpected attached-devices response: {e}") from e

        logger.debug(f"Decoded {len(result.satellites)} satellites, {len(result.devices)} devices")
        return result
