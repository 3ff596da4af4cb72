"""High-level orchestration: fetch CLDR, extract display names, write the output."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, Sequence, Tuple

from .batch import FailurePolicy, extract_display_names
from .config import CLDR, DEFAULT_MAX_WORKERS
from .io import write_locale_database
from .records import LocaleDatabase
from .sources import CldrDataSource, canonicalize_locale, download_cldr, open_cldr_source

LocaleSelection = Literal["available", "discovered", "explicit"]


@dataclass(frozen=True)
class ExtractionRequest:
    """Describe which locales to extract and how failures are treated."""

    selection: LocaleSelection = "available"
    locales: Tuple[str, ...] = ()
    policy: FailurePolicy = "fail-fast"
    max_workers: int = DEFAULT_MAX_WORKERS
    version: str = CLDR["version"]

    @classmethod
    def from_flags(
        cls,
        locales: Sequence[str],
        discover: bool,
        skip_failures: bool,
        workers: int,
        version: Optional[str] = None,
    ) -> "ExtractionRequest":
        """Translate CLI flags into a normalized request."""
        if locales and discover:
            raise ValueError("Pass either explicit --locale values or --discover, not both.")
        if workers < 1:
            raise ValueError("--workers must be at least 1.")

        # Only validated here; CLDR directory names are used verbatim.
        for locale in locales:
            canonicalize_locale(locale)
            if "_" in locale:
                raise ValueError(f"CLDR locale directories use hyphens: pass {locale.replace('_', '-')!r}, not {locale!r}.")

        selection: LocaleSelection = "explicit" if locales else "discovered" if discover else "available"
        return cls(
            selection=selection,
            locales=tuple(locales),
            policy="skip" if skip_failures else "fail-fast",
            max_workers=workers,
            version=version or CLDR["version"],
        )


def resolve_locales(request: ExtractionRequest, source: CldrDataSource) -> Sequence[str]:
    if request.selection == "explicit":
        return request.locales
    if request.selection == "discovered":
        return source.discover_locales()
    return source.available_locales()


def prepare_display_names(
    request: ExtractionRequest,
    raw_root: Path,
    output_root: Path,
    force: bool = False,
    download: bool = True,
) -> LocaleDatabase:
    """
    Run the full pipeline: make the CLDR release available, extract, and write per-locale JSON.
    """
    raw_root.mkdir(parents=True, exist_ok=True)
    if download:
        source = CldrDataSource(download_cldr(raw_root, request.version, force=force))
    else:
        source = open_cldr_source(raw_root, request.version)

    locales = resolve_locales(request, source)
    print(f"[displaynames] Extracting {len(locales)} locales from CLDR {request.version} (policy={request.policy})")
    database = extract_display_names(
        source,
        locales,
        policy=request.policy,
        max_workers=request.max_workers,
    )
    written = write_locale_database(database, output_root)
    print(f"[displaynames] Saved {len(written)} locale records → {output_root}")
    return database


__all__ = ["ExtractionRequest", "LocaleSelection", "prepare_display_names", "resolve_locales"]
