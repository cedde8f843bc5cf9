"""CPU idle sampling, group-file lookup and URL truncation helpers."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from typing import Union

# Keeps a URL within the system log's maximum record length.
URL_SIZE_LIMIT = 824

DEFAULT_STAT_PATH = "/proc/stat"
DEFAULT_GROUP_FILE = "/etc/group"
DEFAULT_USER_NAME = "webappmanager3"

_CPU_FIELDS = 4
_UNSIGNED_RE = re.compile(r"[+-]?[0-9]+")
_LEADING_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

PathLike = Union[str, "os.PathLike[str]"]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def percentages(now: Sequence[int], old: Sequence[int]) -> tuple[list[int], int]:
    """Per-mille share of each counter's change between two samples.

    Returns the list of per-mille values and the total change (never 0).
    A counter that went backwards is treated as having wrapped around.
    """
    diffs = []
    for current, previous in zip(now, old):
        change = current - previous
        if change < 0:
            change = _to_int32((current - previous) % (1 << 64))
        diffs.append(change)

    total = sum(diffs) or 1
    half = _trunc_div(total, 2)
    return [_trunc_div(diff * 1000 + half, total) for diff in diffs], total


def _read_cpu_times(stat_path: PathLike) -> list[int] | None:
    try:
        with open(stat_path, encoding="ascii", errors="replace") as handle:
            text = handle.read(4096)
    except OSError:
        return None
    if not text:
        return None

    values: list[int] = []
    for token in text.split()[1 : 1 + _CPU_FIELDS]:
        match = _UNSIGNED_RE.match(token)
        if match is None:
            break
        values.append(int(match.group(0)))
    values.extend([0] * (_CPU_FIELDS - len(values)))
    return values


class CpuIdleMeter:
    """Tracks the share of CPU time spent idle between successive samples."""

    def __init__(self, stat_path: PathLike = DEFAULT_STAT_PATH) -> None:
        self.stat_path = stat_path
        self._old = [0] * _CPU_FIELDS

    def update(self, update_only: bool = False) -> int:
        """Sample the CPU counters.

        With ``update_only`` the sample only becomes the new baseline and
        1000 is returned. Otherwise the idle share since the previous sample
        is returned in per-mille.
        """
        sample = _read_cpu_times(self.stat_path)
        if update_only:
            if sample is not None:
                self._old = sample
            return 1000

        current = sample if sample is not None else [0] * _CPU_FIELDS
        states, _ = percentages(current, self._old)
        self._old = list(current)
        return states[3]


def tokenize(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on any of ``delimiters``, dropping empty pieces."""
    if not delimiters:
        return [text] if text else []
    pattern = "[" + re.escape(delimiters) + "]+"
    return [piece for piece in re.split(pattern, text) if piece]


def in_group(line: str, user_name: str) -> bool:
    """True if ``user_name`` is among the members of a group-file line."""
    pos = line.rfind(":")
    if pos == len(line) - 1:
        return False
    members = tokenize(line[pos + 1 :], ",")
    return user_name in members


def _atoi(text: str) -> int:
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else 0


def group_ids_for_user(
    group_file: PathLike = DEFAULT_GROUP_FILE,
    user_name: str = DEFAULT_USER_NAME,
) -> list[int]:
    """Group ids from a group file whose member list names ``user_name``.

    Raises OSError if the file cannot be read.
    """
    ids: list[int] = []
    with open(group_file, encoding="utf-8", errors="replace") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line or line[0] in "#\r":
                continue
            if not in_group(line, user_name):
                continue
            fields = tokenize(line, ":")
            if len(fields) < 3:
                continue
            ids.append(_atoi(fields[2]))
    return ids


def set_groups(
    group_file: PathLike = DEFAULT_GROUP_FILE,
    user_name: str = DEFAULT_USER_NAME,
) -> list[int]:
    """Set the supplementary groups of this process to those of ``user_name``.

    Returns the group ids applied. Raises OSError if the group file cannot
    be read or the groups cannot be set.
    """
    ids = group_ids_for_user(group_file, user_name)
    os.setgroups(ids)
    return ids


def truncate_url(url: str) -> str:
    """Cut ``url`` down to at most URL_SIZE_LIMIT characters."""
    if len(url) < URL_SIZE_LIMIT:
        return url
    return url[:URL_SIZE_LIMIT]