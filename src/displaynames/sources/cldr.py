"""Download helper and per-locale reader for the CLDR JSON release."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any, List, Mapping, Optional

from ..config import CLDR, cldr_archive_name, cldr_package_dirs, cldr_release_url
from ..io import (
    METADATA_SUFFIX,
    download_stream,
    load_json,
    needs_download,
    read_metadata,
    sha256sum,
    unzip,
    write_metadata,
)
from ..records import RawLocaleData
from .locales import filter_valid_locales


def download_cldr(raw_root: Path, version: str = CLDR["version"], force: bool = False) -> Path:
    """
    Download the full CLDR JSON release once and extract it under ``data/raw/cldr-json``.

    Parameters
    ----------
    raw_root:
        Directory used to store raw data (default: ``data/raw``).
    version:
        CLDR JSON release tag, e.g. ``44.1.0``.
    force:
        If True, redownload and re-extract even when caches exist.

    Returns
    -------
    Path
        Directory holding the ``cldr-*`` packages.
    """
    cache_root = raw_root / CLDR["folder_name"] / version
    archive = raw_root / cldr_archive_name(version)
    cache_root.mkdir(parents=True, exist_ok=True)

    meta_path = archive.with_suffix(METADATA_SUFFIX)
    meta = read_metadata(meta_path)
    expected_sha = meta.get("sha256")

    downloaded = False
    if force or needs_download(archive, expected_sha):
        url = cldr_release_url(version)
        print(f"[cldr] Downloading CLDR {version} from {url}")
        try:
            download_stream(url, archive)
        except Exception as exc:
            raise RuntimeError(
                f"Failed to download CLDR {version}. "
                "Check the release tag and your network connection, or unpack the archive manually."
            ) from exc
        updated = dict(meta)
        updated["sha256"] = sha256sum(archive)
        updated["version"] = version
        write_metadata(meta_path, updated)
        downloaded = True
    else:
        print(f"[cldr] CLDR {version} archive present; skipping download.")

    if force or downloaded or not any(cache_root.iterdir()):
        print(f"[cldr] Unpacking CLDR {version} ...")
        # A fresh archive replaces whatever an earlier (possibly partial) extraction left behind.
        shutil.rmtree(cache_root)
        cache_root.mkdir(parents=True)
        unzip(archive, cache_root)
    else:
        print(f"[cldr] CLDR {version} already unpacked; skipping extraction.")

    return resolve_cldr_root(cache_root)


def resolve_cldr_root(path: Path) -> Path:
    """Locate the directory that directly contains ``cldr-core`` below ``path``."""
    core = CLDR["packages"]["core"]
    if (path / core).exists():
        return path
    for candidate in sorted(p for p in path.iterdir() if p.is_dir()):
        if (candidate / core).exists():
            return candidate
    raise FileNotFoundError(f"No {core} package found under {path}")


class CldrDataSource:
    """Read the raw display-name payloads of each locale from an unpacked release."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.packages = cldr_package_dirs(root)

    def available_locales(self) -> List[str]:
        """The ``full`` list from ``cldr-core/availableLocales.json``."""
        payload = load_json(self.packages["core"] / "availableLocales.json")
        return [str(locale) for locale in payload["availableLocales"]["full"]]

    def discover_locales(self) -> List[str]:
        """Locales with a ``localeDisplayNames.json`` file, minus malformed identifiers."""
        main = self.packages["localenames"] / "main"
        if not main.exists():
            raise FileNotFoundError(f"Missing CLDR locale names directory at {main}")
        candidates = sorted(path.parent.name for path in main.glob("*/localeDisplayNames.json"))
        return filter_valid_locales(candidates)

    def fetch(self, locale: str) -> RawLocaleData:
        names = self.packages["localenames"] / "main" / locale
        languages = self._section(names / "languages.json", locale, "localeDisplayNames", "languages")
        territories = self._section(names / "territories.json", locale, "localeDisplayNames", "territories")
        scripts = self._section(names / "scripts.json", locale, "localeDisplayNames", "scripts")
        display_names = self._section(names / "localeDisplayNames.json", locale, "localeDisplayNames")
        currencies = self._section(
            self.packages["numbers"] / "main" / locale / "currencies.json", locale, "numbers", "currencies"
        )
        date_fields = self._section(
            self.packages["dates"] / "main" / locale / "dateFields.json", locale, "dates", "fields"
        )
        return RawLocaleData(
            languages=languages,
            territories=territories,
            scripts=scripts,
            locale_display_names=display_names,
            currencies=currencies,
            date_fields=date_fields,
        )

    @staticmethod
    def _section(path: Path, locale: str, *keys: str) -> Mapping[str, Any]:
        node: Any = load_json(path)["main"][locale]
        for key in keys:
            node = node[key]
        if not isinstance(node, Mapping):
            raise TypeError(f"Expected an object at main/{locale}/{'/'.join(keys)} in {path}")
        return node


def open_cldr_source(raw_root: Path, version: Optional[str] = None) -> CldrDataSource:
    """Return a data source over an already unpacked release under ``raw_root``."""
    cache_root = raw_root / CLDR["folder_name"] / (version or CLDR["version"])
    if not cache_root.exists():
        raise FileNotFoundError(
            f"Missing CLDR release under {cache_root}. Run `python main.py cldr` to download it first."
        )
    return CldrDataSource(resolve_cldr_root(cache_root))


__all__ = ["CldrDataSource", "download_cldr", "open_cldr_source", "resolve_cldr_root"]
