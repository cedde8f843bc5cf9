"""String, path, URI and JSON helpers."""

from __future__ import annotations

import json
import math
import os
import posixpath
import re
import stat
import string
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import quote

from .bcp47 import parse_bcp47

_C_SPACE = " \t\n\v\f\r"
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_LEADING_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_RFC3986_RE = re.compile(
    r"^(([^:\/?#]+):)?(\/\/([^\/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?"
)
_AUTHORITY_RE = re.compile(r"^(?:[\w\:]+[@])?([\w.]+)(?:[:])?(?:[0-9]+)?", re.ASCII)

_HOSTNAME_RE = re.compile(
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.)*"
    r"[A-Za-z](?:[A-Za-z0-9-]*[A-Za-z0-9])?\.?"
)
_HEX_DIGITS = frozenset(string.hexdigits.encode())
_PATH_SAFE = "/!$&'()*+,:=@"

_INDENT = "    "
_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def get_error_page_paths(error_page_location: str, language: str = "") -> list[str]:
    """Candidate locations of a localized error page, most specific first."""
    if not error_page_location:
        return []

    filename = posixpath.basename(error_page_location)
    search_path = posixpath.dirname(error_page_location)
    tag = parse_bcp47(language)

    paths: list[str] = []
    if tag is not None:
        resources = f"{search_path}/resources/{tag.language}"
        if tag.has_script:
            scripted = f"{resources}/{tag.script}"
            if tag.has_region:
                scripted += f"/{tag.region}"
            paths.append(f"{scripted}/html/{filename}")
        if tag.has_region:
            paths.append(f"{resources}/{tag.region}/html/{filename}")
        paths.append(f"{resources}/html/{filename}")
    paths.append(f"{search_path}/resources/html/{filename}")
    paths.append(f"{search_path}/{filename}")
    return paths


def get_hostname(url: str) -> str:
    """Return the host part of ``url``, or an empty string."""
    if not url:
        return ""
    match = _RFC3986_RE.fullmatch(url)
    if match is None:
        return ""
    authority = match.group(4) or ""
    host_match = _AUTHORITY_RE.fullmatch(authority)
    if host_match is None:
        return ""
    return host_match.group(1)


def does_path_exist(path: str) -> bool:
    """True if ``path`` names a directory or a regular file."""
    if not path:
        return False
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError):
        return False
    return bool(mode & stat.S_IFDIR or mode & stat.S_IFREG)


def read_file(path: str) -> str:
    """Return the contents of ``path``, or an empty string if unreadable."""
    if not does_path_exist(path):
        return ""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError:
        return ""


def _unescape(segment: str, illegal: bytes) -> Optional[bytes]:
    head, *pieces = segment.encode("utf-8", "surrogateescape").split(b"%")
    out = bytearray(head)
    for piece in pieces:
        digits = piece[:2]
        if len(digits) < 2 or not all(c in _HEX_DIGITS for c in digits):
            return None
        byte = int(digits, 16)
        if byte == 0 or byte in illegal:
            return None
        out.append(byte)
        out += piece[2:]
    return bytes(out)


def _valid_hostname(host: str) -> bool:
    return not host or _HOSTNAME_RE.fullmatch(host) is not None


def uri_to_local(uri: str) -> str:
    """Convert a ``file:`` URI into an absolute local path, or ''."""
    if uri[:5].lower() != "file:":
        return ""
    rest = uri[5:]
    if "#" in rest:
        return ""
    if rest.startswith("///"):
        rest = rest[2:]
    elif rest.startswith("//"):
        rest = rest[2:]
        slash = rest.find("/")
        if slash < 0:
            return ""
        host = _unescape(rest[:slash], b"")
        if host is None or not _valid_hostname(host.decode("utf-8", "replace")):
            return ""
        rest = rest[slash:]
    path = _unescape(rest, b"/")
    if path is None or not path.startswith(b"/"):
        return ""
    return os.fsdecode(path)


def local_to_uri(path: str) -> str:
    """Convert an absolute local path into a ``file://`` URI, or ''."""
    if not path or not posixpath.isabs(path):
        return ""
    return "file://" + quote(os.fsencode(path), safe=_PATH_SAFE)


def get_env_var(name: str) -> str:
    """Value of an environment variable, or '' if unset."""
    return os.environ.get(name, "")


def str_to_int(text: str) -> int:
    """Parse a leading decimal integer that fits in 32 bits.

    Leading whitespace is skipped and trailing characters are ignored.
    Raises ValueError when no number is found or it is out of range.
    """
    match = _LEADING_INT_RE.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def str_to_int_with_default(text: str, default: int) -> int:
    """Like str_to_int, but return ``default`` instead of raising."""
    try:
        return str_to_int(text)
    except ValueError:
        return default


def split_string(text: str, delimiter: str) -> list[str]:
    """Split on ``delimiter``; a trailing empty field is dropped."""
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def trim_string(text: str) -> str:
    """Strip ASCII whitespace from both ends."""
    return text.strip(_C_SPACE)


def replace_substr(text: str, to_search: str, replace_str: str = "") -> str:
    """Replace every occurrence of ``to_search`` with ``replace_str``."""
    if not to_search:
        raise ValueError("search string must not be empty")
    return text.replace(to_search, replace_str)


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"duplicate key: {key!r}")
        result[key] = value
    return result


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON value: {name}")


def string_to_json(text: str) -> Any:
    """Parse strict JSON whose root is an object or an array.

    Raises ValueError on malformed input, duplicate keys, non-finite
    numbers or a scalar root.
    """
    value = json.loads(
        text,
        object_pairs_hook=_reject_duplicates,
        parse_constant=_reject_constant,
    )
    if not isinstance(value, (dict, list)):
        raise ValueError("JSON root must be an object or an array")
    return value


def _quote(text: str) -> str:
    parts = []
    for ch in text:
        code = ord(ch)
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif code < 0x20 or 0x80 <= code < 0x10000:
            parts.append(f"\\u{code:04x}")
        elif code >= 0x10000:
            code -= 0x10000
            high = 0xD800 + (code >> 10)
            low = 0xDC00 + (code & 0x3FF)
            parts.append(f"\\u{high:04x}\\u{low:04x}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "null"
    if math.isinf(value):
        return "1e+9999" if value > 0 else "-1e+9999"
    text = f"{value:.17g}"
    if "." not in text and "e" not in text:
        text += ".0"
    return text


def _is_open_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple)) and len(value) > 0


def _render(value: Any, depth: int) -> str:
    inner = _INDENT * (depth + 1)
    closing = "\n" + _INDENT * depth
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        members = []
        for key in sorted(value):
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, not {type(key).__name__}")
            child = value[key]
            rendered = _render(child, depth + 1)
            if _is_open_container(child):
                rendered = f"\n{inner}{rendered}"
            members.append(f"\n{inner}{_quote(key)}: {rendered}")
        return "{" + ",".join(members) + closing + "}"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        items = [f"\n{inner}{_render(item, depth + 1)}" for item in value]
        return "[" + ",".join(items) + closing + "]"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return _quote(value)
    raise TypeError(f"cannot serialize {type(value).__name__} to JSON")


def json_to_string(value: Any) -> str:
    """Serialize ``value`` as indented JSON with sorted keys."""
    return _render(value, 0)