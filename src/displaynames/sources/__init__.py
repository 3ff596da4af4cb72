"""CLDR data access: release download, locale enumeration and per-locale reads."""

from __future__ import annotations

from .cldr import CldrDataSource, download_cldr, open_cldr_source, resolve_cldr_root
from .locales import canonicalize_locale, filter_valid_locales

__all__ = [
    "CldrDataSource",
    "canonicalize_locale",
    "download_cldr",
    "filter_valid_locales",
    "open_cldr_source",
    "resolve_cldr_root",
]
