"""Pydantic models for the router's attached-devices response."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


def _wire(name: str, *legacy: str) -> dict:
    """Field kwargs accepting ``name`` plus older firmware spellings, serialized as ``name``."""
    return {"validation_alias": AliasChoices(name, *legacy), "serialization_alias": name}


class Device(BaseModel):
    """One attached endpoint (client device or satellite).

    Only ``name`` is rewritten after decoding (by the override resolver);
    everything else is a snapshot of the router response.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    mac: str
    kind: str = Field(**_wire("type", "kind"))
    model: str
    name: str
    ip: str
    connection_type: str = Field(**_wire("connectionType", "connection_type"))

    # Satellite linkage / status metadata, not reported by every firmware
    connected_orbi: str = Field("", **_wire("connectedOrbi", "ConnectedOrbi"))
    connected_orbi_mac: str = Field("", **_wire("connectedOrbiMac", "ConnectedOrbiMAC"))
    connection_img: str = Field("", **_wire("connectionImg"))
    backhaul_status_style: str = Field("", **_wire("backhaulStatusStyle"))
    backhaul_status: str = Field("", **_wire("backhaulStatus"))
    category: str = ""
    status: int = 0
    sat_type: int = Field(0, **_wire("satType", "sat_type"))
    led_status: int = Field(0, **_wire("ledStatus", "led_status"))
    led_brightness: int = Field(0, **_wire("ledBrightness", "led_brightness"))
    led_sync: int = Field(0, **_wire("ledSync", "led_sync"))
    voice_reg: str = Field("", **_wire("voiceReg", "voice_reg"))


class AttachedDevices(BaseModel):
    """Satellites and client devices as returned by one fetch."""

    satellites: list[Device]
    devices: list[Device]
