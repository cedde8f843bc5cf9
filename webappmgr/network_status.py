"""Network connection status as reported by the connection manager."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping


def _as_string(value: Any) -> str:
    """Loose string conversion of a JSON value; containers are rejected."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.17g}"
    raise TypeError(f"cannot convert {type(value).__name__} to a string")


def _as_bool(value: Any) -> bool:
    """Loose boolean conversion of a JSON value; strings and containers are rejected."""
    if value is None:
        return False
    if isinstance(value, (bool, int, float)):
        return bool(value)
    raise TypeError(f"cannot convert {type(value).__name__} to a boolean")


@dataclass
class NetworkInformation:
    """Address details of one network interface."""

    netmask: str = ""
    dns1: str = ""
    dns2: str = ""
    ip_address: str = ""
    method: str = ""
    state: str = ""
    gateway: str = ""
    interface_name: str = ""
    on_internet: str = ""

    @classmethod
    def from_json(cls, info: Any) -> "NetworkInformation":
        """Build from a JSON object; anything else gives empty information."""
        if not isinstance(info, Mapping):
            return cls()
        dns2 = info.get("dns2")
        return cls(
            netmask=_as_string(info.get("netmask")),
            dns1=_as_string(info.get("dns1")),
            dns2=dns2 if isinstance(dns2, str) else "",
            ip_address=_as_string(info.get("ipAddress")),
            method=_as_string(info.get("method")),
            state=_as_string(info.get("state")),
            gateway=_as_string(info.get("gateway")),
            interface_name=_as_string(info.get("interfaceName")),
            on_internet=_as_string(info.get("onInternet")),
        )


@dataclass
class NetworkStatus:
    """Connection type, interface details and the time they were recorded."""

    type: str = ""
    information: NetworkInformation = field(default_factory=NetworkInformation)
    is_internet_connection_available: bool = False
    return_value: bool = False
    saved_date: str = ""

    @classmethod
    def from_json(cls, obj: Any) -> "NetworkStatus":
        """Build from a status reply; anything but an object gives an empty status."""
        if not isinstance(obj, Mapping):
            return cls()
        status = cls(
            return_value=_as_bool(obj.get("returnValue")),
            is_internet_connection_available=_as_bool(
                obj.get("isInternetConnectionAvailable")
            ),
        )
        if status.return_value:
            if isinstance(obj.get("wired"), Mapping):
                status.type = "wired"
            elif isinstance(obj.get("wifi"), Mapping):
                status.type = "wifi"
            else:
                status.type = "wifiDirect"
            status.information = NetworkInformation.from_json(obj.get(status.type))
        status.saved_date = datetime.now().strftime("%c")
        return status