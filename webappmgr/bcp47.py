"""Minimal parsing of BCP 47 language tags (language, script, region)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# language: 2-3 lower-case letters; script: 4 letters; region: 2 upper-case
# letters or 3 digits.
_TAG_RE = re.compile(
    r"^([a-z]{2,3})(?:-([A-z]{4}))?(?:-([A-Z]{2}|[0-9]{3}))?$"
)


@dataclass(frozen=True)
class BCP47:
    """The language, script and region parts of a language tag."""

    language: str
    script: str = ""
    region: str = ""

    @property
    def has_language(self) -> bool:
        return bool(self.language)

    @property
    def has_script(self) -> bool:
        return bool(self.script)

    @property
    def has_region(self) -> bool:
        return bool(self.region)


def parse_bcp47(text: str) -> Optional[BCP47]:
    """Parse ``text`` as a language tag; return None if it does not match."""
    if not text:
        return None
    match = _TAG_RE.fullmatch(text)
    if match is None:
        return None
    language, script, region = match.groups(default="")
    return BCP47(language=language, script=script, region=region)