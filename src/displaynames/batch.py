"""Concurrent extraction of many locales into a single locale database."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Dict, List, Literal, Optional, Protocol, Sequence, Tuple

from tqdm import tqdm

from .assemble import assemble_locale_record
from .config import DEFAULT_MAX_WORKERS
from .records import LocaleDatabase, LocaleRecord, RawLocaleData

FailurePolicy = Literal["fail-fast", "skip"]
FAILURE_POLICIES: Tuple[FailurePolicy, ...] = ("fail-fast", "skip")


class LocaleDataSource(Protocol):
    """Collaborator that knows where the raw CLDR payloads live."""

    def available_locales(self) -> Sequence[str]:
        ...

    def fetch(self, locale: str) -> RawLocaleData:
        ...


def extract_locale(source: LocaleDataSource, locale: str) -> LocaleRecord:
    """Fetch the raw payloads of ``locale`` and assemble its record."""
    return assemble_locale_record(locale, source.fetch(locale))


def extract_display_names(
    source: LocaleDataSource,
    locales: Optional[Sequence[str]] = None,
    *,
    policy: FailurePolicy = "fail-fast",
    max_workers: int = DEFAULT_MAX_WORKERS,
    progress: bool = True,
) -> LocaleDatabase:
    """
    Extract every requested locale concurrently.

    Parameters
    ----------
    source:
        Data-access collaborator providing raw payloads and the default locale list.
    locales:
        Locale identifiers to extract; defaults to ``source.available_locales()``.
    policy:
        ``"fail-fast"`` re-raises the first failure and cancels pending work;
        ``"skip"`` reports the failure and leaves the locale out of the result.
    max_workers:
        Size of the thread pool.
    progress:
        Show a tqdm progress bar.

    Returns
    -------
    LocaleDatabase
        Locale identifier to record, in request order.
    """
    if policy not in FAILURE_POLICIES:
        raise ValueError(f"Unknown failure policy '{policy}'. Options: {FAILURE_POLICIES}")
    if max_workers < 1:
        raise ValueError("max_workers must be at least 1.")

    targets = _dedupe(locales if locales is not None else source.available_locales())
    if not targets:
        return {}

    results: Dict[str, LocaleRecord] = {}
    failures: List[str] = []
    with tqdm(total=len(targets), desc="Extracting locales", leave=False, disable=not progress) as pbar:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(targets))) as executor:
            futures: Dict[Future[LocaleRecord], str] = {
                executor.submit(extract_locale, source, locale): locale for locale in targets
            }
            for future in as_completed(futures):
                locale = futures[future]
                pbar.update(1)
                try:
                    results[locale] = future.result()
                except Exception as exc:
                    if policy == "fail-fast":
                        for pending in futures:
                            pending.cancel()
                        raise
                    print(f"[displaynames] Skipping locale {locale}: {exc}")
                    failures.append(locale)

    if failures:
        print(f"[displaynames] Extracted {len(results)} locales; skipped {len(failures)}: {', '.join(sorted(failures))}")
    return {locale: results[locale] for locale in targets if locale in results}


def _dedupe(locales: Sequence[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for locale in locales:
        if locale in seen:
            continue
        ordered.append(locale)
        seen.add(locale)
    return ordered


__all__ = [
    "FAILURE_POLICIES",
    "FailurePolicy",
    "LocaleDataSource",
    "extract_display_names",
    "extract_locale",
]
