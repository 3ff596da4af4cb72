"""
Classification of annotated CLDR keys into a base key plus a width.

CLDR encodes alternate display forms inside the key itself, e.g. ``GB-alt-short``
or ``year-narrow``. Every extractor goes through :func:`parse_key` so the
string surgery lives in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Union

from ..records import Width

KeyWidth = Union[Width, Literal["unsupported-alt"]]


@dataclass(frozen=True)
class WidthMarkers:
    """Substring markers that tag a key as a narrower (or unsupported) variant."""

    narrow: str
    short: str
    alternate: Optional[str] = None


@dataclass(frozen=True)
class ParsedKey:
    base: str
    width: KeyWidth

    @property
    def supported(self) -> bool:
        return self.width != "unsupported-alt"


# languages.json / territories.json / scripts.json / calendar types
ALT_MARKERS = WidthMarkers(narrow="-alt-narrow", short="-alt-short", alternate="-alt-")
# dateFields.json
FIELD_MARKERS = WidthMarkers(narrow="-narrow", short="-short")


def parse_key(key: str, markers: WidthMarkers = ALT_MARKERS) -> ParsedKey:
    """
    Split ``key`` into its bare form and the width it encodes.

    Everything from the first width marker onward is removed. Keys carrying the
    generic alternate marker without a short/narrow qualifier (``-alt-long``,
    ``-alt-variant``, ...) are reported as ``unsupported-alt``.
    """
    if markers.narrow in key:
        return ParsedKey(key.split(markers.narrow, 1)[0], "narrow")
    if markers.short in key:
        return ParsedKey(key.split(markers.short, 1)[0], "short")
    if markers.alternate and markers.alternate in key:
        # TODO: decide whether -alt-long should map to the long bucket once CLDR documents its use.
        return ParsedKey(key.split(markers.alternate, 1)[0], "unsupported-alt")
    return ParsedKey(key, "long")


__all__ = ["ALT_MARKERS", "FIELD_MARKERS", "KeyWidth", "ParsedKey", "WidthMarkers", "parse_key"]
