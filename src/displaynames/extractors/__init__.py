"""Per-category normalizers turning raw CLDR mappings into width buckets."""

from __future__ import annotations

from .currency import extract_currency_styles
from .date_fields import extract_date_field_styles
from .keys import ALT_MARKERS, FIELD_MARKERS, ParsedKey, WidthMarkers, parse_key
from .language import extract_language_styles, extract_standard_language_styles
from .styles import split_styles

__all__ = [
    "ALT_MARKERS",
    "FIELD_MARKERS",
    "ParsedKey",
    "WidthMarkers",
    "extract_currency_styles",
    "extract_date_field_styles",
    "extract_language_styles",
    "extract_standard_language_styles",
    "parse_key",
    "split_styles",
]
