"""Assemble the normalized display-name record of a single locale."""

from __future__ import annotations

from typing import Any, Mapping

from .extractors import (
    extract_currency_styles,
    extract_date_field_styles,
    extract_language_styles,
    split_styles,
)
from .records import DisplayNamePatterns, DisplayNameTypes, LocaleRecord, RawLocaleData


def assemble_locale_record(locale: str, raw: RawLocaleData) -> LocaleRecord:
    """
    Run every category extractor over ``raw`` and combine the results.

    Extractor failures propagate unchanged; a partially built record is never
    returned.
    """
    display_names = raw.locale_display_names
    types = DisplayNameTypes(
        language=extract_language_styles(raw.languages, raw.territories),
        region=split_styles(raw.territories),
        script=split_styles(raw.scripts),
        currency=extract_currency_styles(locale, raw.currencies),
        calendar=split_styles(_calendar_names(display_names)),
        dateTimeField=extract_date_field_styles(raw.date_fields),
    )
    # Alternate locale patterns are not carried over.
    patterns = DisplayNamePatterns(locale=display_names["localeDisplayPattern"]["localePattern"])
    return LocaleRecord(types=types, patterns=patterns)


def _calendar_names(display_names: Mapping[str, Any]) -> Mapping[str, str]:
    return display_names["types"]["calendar"]


__all__ = ["assemble_locale_record"]
