"""
Language display names in their two flavours.

``dialect`` keeps CLDR's own names for compound tags ("American English"),
``standard`` spells them out as "English (United States)" whenever the second
subtag is a known region.
"""

from __future__ import annotations

from typing import Mapping

from ..records import LanguageStyleData, WidthBucketedData
from .styles import split_styles


def standard_language_name(
    key: str,
    dialect_value: str,
    languages: Mapping[str, str],
    regions: Mapping[str, str],
) -> str:
    """Return the "Language (Region)" composite for ``key`` or fall back to ``dialect_value``."""
    if "-" not in key:
        return dialect_value
    subtags = key.split("-")
    language_subtag, region_subtag = subtags[0], subtags[1]
    region_name = regions.get(region_subtag)
    language_name = languages.get(language_subtag)
    if region_name is None or language_name is None:
        return dialect_value
    return f"{language_name} ({region_name})"


def extract_standard_language_styles(
    languages: Mapping[str, str],
    regions: Mapping[str, str],
) -> WidthBucketedData:
    return split_styles(
        languages,
        resolve=lambda key, value: standard_language_name(key, value, languages, regions),
    )


def extract_language_styles(languages: Mapping[str, str], regions: Mapping[str, str]) -> LanguageStyleData:
    """Build both the dialect and the standard language buckets."""
    return LanguageStyleData(
        dialect=split_styles(languages),
        standard=extract_standard_language_styles(languages, regions),
    )


__all__ = [
    "extract_language_styles",
    "extract_standard_language_styles",
    "standard_language_name",
]
