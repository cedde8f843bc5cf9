"""A small URL splitter with local-file helpers."""

from __future__ import annotations

import string
from collections.abc import Iterable, Mapping
from typing import Optional, Union

from .utils import local_to_uri, uri_to_local

_UNRESERVED = frozenset(string.ascii_letters + string.digits + "-._~")

QueryPairs = Union[Mapping[str, str], Iterable[tuple[str, str]]]


def _find_first_of(text: str, chars: str, start: Optional[int]) -> Optional[int]:
    if start is None:
        return None
    positions = [pos for pos in (text.find(ch, start) for ch in chars) if pos >= 0]
    return min(positions) if positions else None


def _find(text: str, sub: str, start: Optional[int] = 0) -> Optional[int]:
    if start is None:
        return None
    pos = text.find(sub, start)
    return pos if pos >= 0 else None


def _slice(text: str, start: int, end: Optional[int]) -> str:
    if end is None or end < start:
        return text[start:]
    return text[start:end]


def _escape_component(text: str) -> str:
    return "".join(
        ch if ch in _UNRESERVED or ord(ch) >= 0x80 else f"%{ord(ch):02X}"
        for ch in text
    )


class Url:
    """A URI split into scheme, host, port, path, query and fragment."""

    def __init__(self, uri: str) -> None:
        self.scheme = ""
        self.host = ""
        self.port = ""
        self.path = ""
        self.query = ""
        self.fragment = ""
        self._base = ""
        self._parse(uri)

    def _parse(self, uri: str) -> None:
        scheme_end = _find(uri, ":")
        if scheme_end is not None:
            self.scheme = uri[:scheme_end]

        authority_start = _find(uri, "//")
        if authority_start is not None:
            authority_start += 2
        authority_end = _find_first_of(uri, "/?#", authority_start)

        if authority_start is not None:
            host_start = authority_start
            user_info_end = _find(uri, "@", authority_start)
            if user_info_end is not None:
                host_start = user_info_end + 1
            host_end = _find_first_of(uri, ":/?#", host_start)
            self.host = _slice(uri, host_start, host_end)
            if host_end is not None and uri[host_end] == ":":
                self.port = _slice(uri, host_end + 1, authority_end)

        path_end = _find_first_of(uri, "?#", authority_end)
        self._base = _slice(uri, 0, path_end)

        if authority_start is None:
            self.path = uri[(scheme_end + 1 if scheme_end is not None else 0):]
        elif authority_end is not None:
            if uri[authority_end] == "/":
                self.path = _slice(uri, authority_end, path_end)
            query_start = _find(uri, "?", authority_end)
            if query_start is not None:
                self.query = _slice(uri, query_start, _find(uri, "#", query_start))
            fragment_start = _find(uri, "#", authority_end)
            if fragment_start is not None:
                self.fragment = uri[fragment_start:]

    def set_query(self, query: QueryPairs) -> None:
        """Replace the query with escaped ``key=value`` pairs."""
        pairs = query.items() if isinstance(query, Mapping) else query
        encoded = "&".join(
            f"{_escape_component(key)}={_escape_component(value)}"
            for key, value in pairs
        )
        self.query = f"?{encoded}" if encoded else ""

    def to_string(self) -> str:
        return self._base + self.query + self.fragment

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Url({self.to_string()!r})"

    def to_local_file(self) -> str:
        """The local path of a ``file:`` URL, or ''."""
        return uri_to_local(self._base)

    @classmethod
    def from_local_file(cls, path: str) -> "Url":
        """Build a ``file://`` URL from an absolute path."""
        return cls(local_to_uri(path))

    def is_local_file(self) -> bool:
        return self.scheme == "file"

    def file_name(self) -> str:
        """The last path component of a local file URL, or ''."""
        if not self.is_local_file():
            return ""
        return self.to_local_file().rpartition("/")[2]