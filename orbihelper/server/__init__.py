"""HTTP server exposing the attached-devices list."""

from orbihelper.server.app import AttachedDevicesHandler, error_status, make_server, negotiate

__all__ = [
    "AttachedDevicesHandler",
    "error_status",
    "make_server",
    "negotiate",
]
