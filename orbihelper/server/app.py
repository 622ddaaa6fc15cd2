"""HTTP surface serving ``GET /attached-devices`` with content negotiation.

Each request runs the whole pipeline (config load, router fetch, override
resolution) on its own thread and event loop; nothing is shared between
requests except the read-only :class:`DeviceClient`.
"""

from __future__ import annotations

import asyncio
import http.server
from http import HTTPStatus
from urllib.parse import urlsplit

from loguru import logger

from orbihelper import __version__
from orbihelper.config.store import ConfigStore
from orbihelper.devices.client import DeviceClient
from orbihelper.devices.pipeline import get_attached_devices
from orbihelper.devices.render import render_json, render_plain_text
from orbihelper.exceptions import ConfigError, NetworkError, OrbiHelperError, ResponseParseError

ATTACHED_DEVICES_ROUTE = "/attached-devices"

MEDIA_JSON = "application/json"
MEDIA_TEXT = "text/plain"

# Concrete types in preference order for wildcard matches
_PRODUCIBLE = (MEDIA_JSON, MEDIA_TEXT)

_ERROR_STATUS: dict[type[OrbiHelperError], HTTPStatus] = {
    ConfigError: HTTPStatus.INTERNAL_SERVER_ERROR,
    NetworkError: HTTPStatus.BAD_GATEWAY,
    ResponseParseError: HTTPStatus.BAD_GATEWAY,
}


def negotiate(accept: str | None) -> str | None:
    """Pick ``application/json`` or ``text/plain`` from an ``Accept`` header.

    Entries are tried in descending q-value order (ties keep header order).
    A missing header counts as ``*/*``. Returns None when nothing we can
    produce is acceptable.
    """
    if accept is None or not accept.strip():
        return MEDIA_JSON

    candidates: list[tuple[float, str]] = []
    excluded: set[str] = set()
    for part in accept.split(","):
        media, _, params = part.partition(";")
        media = media.strip().lower()
        if not media:
            continue
        q = 1.0
        for param in params.split(";"):
            key, _, value = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    q = float(value.strip())
                except ValueError:
                    q = 0.0
        if q > 0:
            candidates.append((q, media))
        else:
            excluded.add(media)

    candidates.sort(key=lambda c: c[0], reverse=True)
    for _, media in candidates:
        for produced in _PRODUCIBLE:
            if produced not in excluded and _media_matches(media, produced):
                return produced
    return None


def _media_matches(pattern: str, media: str) -> bool:
    """True if ``pattern`` (``type/subtype``, ``type/*`` or ``*/*``) covers ``media``."""
    if pattern in ("*/*", media):
        return True
    main_type, _, subtype = pattern.partition("/")
    return subtype == "*" and media.startswith(f"{main_type}/")


def error_status(error: OrbiHelperError) -> HTTPStatus:
    """Map a pipeline error to the response status."""
    for exc_type, status in _ERROR_STATUS.items():
        if isinstance(error, exc_type):
            return status
    return HTTPStatus.INTERNAL_SERVER_ERROR


class AttachedDevicesHandler(http.server.BaseHTTPRequestHandler):
    """Request handler; ``store`` and ``client`` are bound by :func:`make_server`."""

    store: ConfigStore
    client: DeviceClient
    server_version = f"orbihelper/{__version__}"

    def do_GET(self) -> None:
        path = urlsplit(self.path).path
        if path.rstrip("/") != ATTACHED_DEVICES_ROUTE:
            self._send_text(HTTPStatus.NOT_FOUND, "Not Found\n")
            return

        media_type = negotiate(self.headers.get("Accept"))
        if media_type is None:
            self._send_text(
                HTTPStatus.NOT_ACCEPTABLE,
                f"Not Acceptable: supported types are {MEDIA_JSON}, {MEDIA_TEXT}\n",
            )
            return

        try:
            attached = asyncio.run(get_attached_devices(self.store, self.client))
        except OrbiHelperError as e:
            status = error_status(e)
            logger.error(f"GET {path} failed: {type(e).__name__}: {e}")
            self._send_text(status, f"{status.phrase}: {e}\n")
            return

        if media_type == MEDIA_JSON:
            self._send(HTTPStatus.OK, render_json(attached).encode("utf-8"), MEDIA_JSON)
        else:
            self._send_text(HTTPStatus.OK, render_plain_text(attached))

    def _method_not_allowed(self) -> None:
        self.send_response(HTTPStatus.METHOD_NOT_ALLOWED)
        self.send_header("Allow", "GET")
        self.send_header("Content-Length", "0")
        self.end_headers()

    do_HEAD = do_POST = do_PUT = do_PATCH = do_DELETE = _method_not_allowed

    def _send_text(self, status: HTTPStatus, text: str) -> None:
        self._send(status, text.encode("utf-8"), f"{MEDIA_TEXT}; charset=utf-8")

    def _send(self, status: HTTPStatus, data: bytes, content_type: str) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def log_message(self, format: str, *args: object) -> None:
        logger.info(f"{self.address_string()} - {format % args}")


def make_server(
    store: ConfigStore,
    client: DeviceClient,
    host: str = "127.0.0.1",
    port: int = 3030,
) -> http.server.ThreadingHTTPServer:
    """Create a threading server whose handler is bound to ``store`` and ``client``."""
    handler = type(
        "BoundAttachedDevicesHandler",
        (AttachedDevicesHandler,),
        {"store": store, "client": client},
    )
    return http.server.ThreadingHTTPServer((host, port), handler)
