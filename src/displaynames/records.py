"""Record shapes shared by the extractors, the assembler and the writers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, TypedDict

Width = Literal["long", "short", "narrow"]

RawKeyedRecord = Mapping[str, str]


class WidthBucketedData(TypedDict):
    long: Dict[str, str]
    short: Dict[str, str]
    narrow: Dict[str, str]


class LanguageStyleData(TypedDict):
    dialect: WidthBucketedData
    standard: WidthBucketedData


class DisplayNameTypes(TypedDict):
    language: LanguageStyleData
    region: WidthBucketedData
    script: WidthBucketedData
    currency: WidthBucketedData
    calendar: WidthBucketedData
    dateTimeField: WidthBucketedData


class DisplayNamePatterns(TypedDict):
    locale: Any


class LocaleRecord(TypedDict):
    types: DisplayNameTypes
    patterns: DisplayNamePatterns


LocaleDatabase = Dict[str, LocaleRecord]


@dataclass(frozen=True)
class RawLocaleData:
    """The six raw CLDR payloads needed to assemble one locale."""

    languages: Mapping[str, str]
    territories: Mapping[str, str]
    scripts: Mapping[str, str]
    locale_display_names: Mapping[str, Any]
    currencies: Mapping[str, Mapping[str, Any]]
    date_fields: Mapping[str, Mapping[str, Any]]


def empty_buckets() -> WidthBucketedData:
    return WidthBucketedData(long={}, short={}, narrow={})


__all__ = [
    "DisplayNamePatterns",
    "DisplayNameTypes",
    "LanguageStyleData",
    "LocaleDatabase",
    "LocaleRecord",
    "RawKeyedRecord",
    "RawLocaleData",
    "Width",
    "WidthBucketedData",
    "empty_buckets",
]
