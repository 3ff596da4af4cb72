"""BCP-47 locale identifier canonicalization used to filter CLDR directory names."""

from __future__ import annotations

import re
from typing import Iterable, List

from ..errors import InvalidLocaleIdentifierError

_LANGUAGE = re.compile(r"^(?:[a-z]{2,3}|[a-z]{5,8})$", re.IGNORECASE)
_SCRIPT = re.compile(r"^[a-z]{4}$", re.IGNORECASE)
_REGION = re.compile(r"^(?:[a-z]{2}|[0-9]{3})$", re.IGNORECASE)
_VARIANT = re.compile(r"^(?:[a-z0-9]{5,8}|[0-9][a-z0-9]{3})$", re.IGNORECASE)


def canonicalize_locale(tag: str) -> str:
    """
    Validate ``tag`` and return it with canonical subtag casing.

    Accepts ``language[-script][-region][-variant...]`` with either ``-`` or
    ``_`` separators, e.g. ``sr_latn_me`` becomes ``sr-Latn-ME``.
    """
    subtags = tag.replace("_", "-").split("-")
    if not subtags or not _LANGUAGE.match(subtags[0]):
        raise InvalidLocaleIdentifierError(tag)

    parts = [subtags[0].lower()]
    rest = subtags[1:]
    if rest and _SCRIPT.match(rest[0]):
        parts.append(rest.pop(0).title())
    if rest and _REGION.match(rest[0]):
        parts.append(rest.pop(0).upper())

    seen_variants = set()
    for subtag in rest:
        variant = subtag.lower()
        if not _VARIANT.match(variant) or variant in seen_variants:
            raise InvalidLocaleIdentifierError(tag)
        seen_variants.add(variant)
        parts.append(variant)
    return "-".join(parts)


def filter_valid_locales(candidates: Iterable[str]) -> List[str]:
    """Keep well-formed identifiers (as given) and warn about the rest."""
    valid: List[str] = []
    for candidate in candidates:
        try:
            canonicalize_locale(candidate)
        except InvalidLocaleIdentifierError as exc:
            print(f"[cldr] {exc}; skipping.")
            continue
        valid.append(candidate)
    return valid


__all__ = ["canonicalize_locale", "filter_valid_locales"]
