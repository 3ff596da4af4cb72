"""Static configuration for the CLDR download and display-name extraction."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, TypedDict


class CLDRPackages(TypedDict):
    core: str
    localenames: str
    numbers: str
    dates: str


class CLDRConfig(TypedDict):
    version: str
    release_url: str
    archive_name: str
    folder_name: str
    packages: CLDRPackages


# Default directories used by the Typer CLI; callers may override these.
DEFAULT_RAW_ROOT = Path("data/raw")
DEFAULT_OUTPUT_ROOT = Path("data/displaynames")
DEFAULT_MAX_WORKERS = 8

# ---------------------------------------------------------------------------
# CLDR JSON release payload.

CLDR: CLDRConfig = {
    "version": "44.1.0",
    "release_url": "https://github.com/unicode-org/cldr-json/releases/download/{version}/{archive_name}",
    "archive_name": "cldr-{version}-json-full.zip",
    "folder_name": "cldr-json",
    "packages": {
        "core": "cldr-core",
        "localenames": "cldr-localenames-full",
        "numbers": "cldr-numbers-full",
        "dates": "cldr-dates-full",
    },
}

# ---------------------------------------------------------------------------
# Date/time field keys whose CLDR names differ from the Intl.DisplayNames ones.

DATE_TIME_FIELD_KEYS: Mapping[str, str] = {
    "week": "weekOfYear",
    "zone": "timeZoneName",
}


def cldr_archive_name(version: str) -> str:
    """Return the release archive filename for ``version``."""
    return CLDR["archive_name"].format(version=version)


def cldr_release_url(version: str) -> str:
    """Return the download URL of the full CLDR JSON release for ``version``."""
    return CLDR["release_url"].format(version=version, archive_name=cldr_archive_name(version))


def cldr_package_dirs(root: Path) -> Dict[str, Path]:
    """Map package aliases to their directories under an unpacked release."""
    packages: Mapping[str, str] = CLDR["packages"]  # type: ignore[assignment]
    return {alias: root / name for alias, name in packages.items()}


__all__ = [
    "CLDR",
    "CLDRConfig",
    "CLDRPackages",
    "DATE_TIME_FIELD_KEYS",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_OUTPUT_ROOT",
    "DEFAULT_RAW_ROOT",
    "cldr_archive_name",
    "cldr_package_dirs",
    "cldr_release_url",
]
