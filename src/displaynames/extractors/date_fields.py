from __future__ import annotations

from typing import Any, Mapping

from ..config import DATE_TIME_FIELD_KEYS
from ..records import WidthBucketedData, empty_buckets
from .keys import FIELD_MARKERS, parse_key


def extract_date_field_styles(
    fields: Mapping[str, Mapping[str, Any]],
    key_map: Mapping[str, str] = DATE_TIME_FIELD_KEYS,
) -> WidthBucketedData:
    """
    Collect date/time field display names from ``dateFields.json``.

    Entries without a ``displayName`` (relative-time patterns only) are skipped.
    Bare keys are renamed through ``key_map``; unknown keys are kept as-is.
    """
    buckets = empty_buckets()
    for key, value in fields.items():
        if "displayName" not in value:
            continue
        parsed = parse_key(key, FIELD_MARKERS)
        target = key_map.get(parsed.base, parsed.base)
        buckets[parsed.width][target] = value["displayName"]
    return buckets


__all__ = ["extract_date_field_styles"]
