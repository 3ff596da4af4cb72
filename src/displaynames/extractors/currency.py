from __future__ import annotations

from typing import Any, Mapping

from ..errors import MissingRequiredFieldError
from ..records import WidthBucketedData, empty_buckets


def extract_currency_styles(locale: str, currencies: Mapping[str, Mapping[str, Any]]) -> WidthBucketedData:
    """Project ``currencies.json`` records onto the long bucket (CLDR has no short/narrow names)."""
    buckets = empty_buckets()
    for code, value in currencies.items():
        display_name = value.get("displayName")
        if not display_name:
            raise MissingRequiredFieldError(locale, code, "displayName")
        buckets["long"][code] = str(display_name)
    return buckets


__all__ = ["extract_currency_styles"]
