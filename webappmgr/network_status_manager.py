"""Tracks network status and logs what changed between updates."""

from __future__ import annotations

from typing import Optional, TextIO

from .logs import log_msg
from .msgid import MsgId
from .network_status import NetworkInformation, NetworkStatus

_INFO_FIELDS = (
    ("ipAddress", "ip_address"),
    ("dns1", "dns1"),
    ("dns2", "dns2"),
    ("method", "method"),
    ("state", "state"),
    ("gateway", "gateway"),
    ("interfaceName", "interface_name"),
    ("onInternet", "on_internet"),
)


class NetworkStatusManager:
    """Holds the current network status and logs differences to new ones."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.current = NetworkStatus()
        self._stream = stream
        self._changes: dict[str, tuple[str, str]] = {}

    @property
    def pending(self) -> dict[str, tuple[str, str]]:
        """Changes recorded but not yet logged."""
        return dict(self._changes)

    def update_network_status(self, status: NetworkStatus) -> list[tuple[str, str, str]]:
        """Compare ``status`` with the current one, log and adopt it if it differs.

        Returns the logged changes as (key, previous, current) tuples.
        """
        if self.current.type != status.type:
            self.append_log(status.type, self.current.type, status.type)

        self.check_information_change(status.information)
        if not self._changes:
            return []
        self.append_log("date", self.current.saved_date, status.saved_date)
        logged = self.print_log()
        self.current = status
        return logged

    def check_information_change(self, info: NetworkInformation) -> None:
        """Record every interface detail that differs from the current one."""
        previous = self.current.information
        for key, attribute in _INFO_FIELDS:
            old = getattr(previous, attribute)
            new = getattr(info, attribute)
            if old != new:
                self.append_log(key, old, new)

    def append_log(self, key: str, previous: str, current: str) -> None:
        """Record a change; a key already recorded keeps its first entry."""
        self._changes.setdefault(key, (previous, current))

    def print_log(self) -> list[tuple[str, str, str]]:
        """Log and clear the recorded changes, returning them."""
        logged = [(key, old, new) for key, (old, new) in self._changes.items()]
        for key, old, new in logged:
            log_msg(
                "INFO",
                MsgId.NETWORKSTATUS_INFO.value,
                [("CHANGE", key), ("Previous", old), ("Current", new)],
                "",
                self._stream,
            )
        self._changes.clear()
        return logged