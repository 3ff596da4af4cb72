from __future__ import annotations

from typing import Callable, Optional

from ..records import RawKeyedRecord, WidthBucketedData, empty_buckets
from .keys import ALT_MARKERS, WidthMarkers, parse_key

ValueResolver = Callable[[str, str], str]


def split_styles(
    record: RawKeyedRecord,
    *,
    markers: WidthMarkers = ALT_MARKERS,
    resolve: Optional[ValueResolver] = None,
) -> WidthBucketedData:
    """
    Distribute a flat CLDR name mapping over the long/short/narrow buckets.

    ``resolve`` receives ``(base_key, raw_value)`` and may rewrite the stored
    value; the language extractor uses it to synthesize standard names.
    """
    buckets = empty_buckets()
    for key, value in record.items():
        parsed = parse_key(key, markers)
        if not parsed.supported:
            continue
        buckets[parsed.width][parsed.base] = resolve(parsed.base, value) if resolve else value
    return buckets


__all__ = ["ValueResolver", "split_styles"]
