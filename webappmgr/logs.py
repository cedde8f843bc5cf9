"""Debug-log switches and a console log writer."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, TextIO, Union

_logger = logging.getLogger(__name__)

# A message carries at most this many key/value fields.
MAX_FIELDS = 10

# Fields from this position on are joined with " , " instead of ", ".
_WIDE_SEPARATOR_FROM = 7


class LogLevel(IntEnum):
    """Severity levels of the system log."""

    NONE = -1
    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


_LEVEL_NAMES = {
    LogLevel.NONE: "None",
    LogLevel.EMERGENCY: "EMERGENCY",
    LogLevel.ALERT: "ALERT",
    LogLevel.CRITICAL: "CRITICAL",
    LogLevel.ERROR: "ERROR",
    LogLevel.WARNING: "WARNING",
    LogLevel.NOTICE: "NOTICE",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
}

_CONTROL_KEYS = {
    "all": ("events", "bundle_messages"),
    "event": ("events",),
    "bundleMessage": ("bundle_messages",),
    "mouseMove": ("mouse_move",),
}
_SWITCH_VALUES = {"on": True, "off": False}


@dataclass
class LogControl:
    """Switches for the optional kinds of debug logging."""

    events: bool = False
    bundle_messages: bool = False
    mouse_move: bool = False

    def set(self, keys: str, value: str) -> None:
        """Turn the switches named by ``keys`` "on" or "off".

        Unknown keys or values leave every switch unchanged.
        """
        _logger.debug("set log control: keys=%s value=%s", keys, value)
        attributes = _CONTROL_KEYS.get(keys)
        enabled = _SWITCH_VALUES.get(value)
        if attributes is None or enabled is None:
            return
        for attribute in attributes:
            setattr(self, attribute, enabled)


_control = LogControl()


def set_log_control(keys: str, value: str) -> None:
    """Change the process-wide debug-log switches."""
    _control.set(keys, value)


def debug_events_enabled() -> bool:
    return _control.events


def debug_bundle_messages_enabled() -> bool:
    return _control.bundle_messages


def debug_mouse_move_enabled() -> bool:
    return _control.mouse_move


def log_level_name(level: int) -> str:
    """Name of a log level, or '' for an unknown one."""
    try:
        return _LEVEL_NAMES[LogLevel(level)]
    except ValueError:
        return ""


def _render_value(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def format_fields(fields: Sequence[tuple[str, Any]], text: str = "") -> str:
    """Render key/value fields followed by free text.

    String values are quoted. Raises ValueError for more than MAX_FIELDS
    fields.
    """
    count = len(fields)
    if count > MAX_FIELDS:
        raise ValueError(f"at most {MAX_FIELDS} fields are supported, got {count}")
    if count == 0:
        return text

    rendered = [f"{{{key}:{_render_value(value)}}}" for key, value in fields]
    head = ", ".join(rendered[:_WIDE_SEPARATOR_FROM])
    tail = rendered[_WIDE_SEPARATOR_FROM:]
    if tail:
        head = " , ".join([head, *tail])
    if count <= 2:
        return head + text
    return f"{head} {text}"


def log_msg(
    level: Union[str, LogLevel, None],
    msgid: Optional[str],
    fields: Iterable[tuple[str, Any]] = (),
    text: str = "",
    stream: Optional[TextIO] = None,
) -> None:
    """Write one formatted log line to ``stream`` (standard error by default)."""
    out = stream if stream is not None else sys.stderr
    if isinstance(level, LogLevel):
        level = log_level_name(level)
    body = format_fields(list(fields), text)
    out.write(f"[{level or ''}] {msgid or ''} {body}\n")


def log_string(
    level: int,
    msgid: Optional[str],
    kvpairs: Optional[str],
    message: Optional[str],
    stream: Optional[TextIO] = None,
) -> None:
    """Write a preformatted log line to ``stream`` (standard error by default)."""
    out = stream if stream is not None else sys.stderr
    out.write(
        f"[{log_level_name(level)}] {msgid or ''} {kvpairs or ''} {message or ''}\n"
    )