"""Helpers for downloading the CLDR release and reading/writing JSON payloads."""

from __future__ import annotations

import hashlib
import json
import os
import tempfile
import zipfile
from pathlib import Path
from typing import Any, List, Mapping, Optional

import requests

from .records import LocaleDatabase, LocaleRecord

METADATA_SUFFIX = ".meta.json"


def sha256sum(path: Path) -> str:
    """Compute the SHA256 checksum for a file."""
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 1024), b""):
            digest.update(chunk)
    return digest.hexdigest()


def read_metadata(path: Path) -> Mapping[str, Any]:
    """Load the sidecar metadata of an archive, returning an empty mapping when unusable."""
    if not path.exists():
        return {}
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        return {}


def write_metadata(path: Path, payload: Mapping[str, Any]) -> None:
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def needs_download(archive: Path, expected_sha: Optional[str]) -> bool:
    """Determine whether the archive must be fetched again."""
    if not archive.exists():
        return True
    if not expected_sha:
        return False
    return sha256sum(archive) != expected_sha


def download_stream(url: str, dest: Path) -> None:
    """Stream a remote file to disk atomically."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    with requests.get(url, stream=True, timeout=60) as response:
        response.raise_for_status()
        with tempfile.NamedTemporaryFile(delete=False, dir=dest.parent) as tmp:
            for chunk in response.iter_content(chunk_size=1024 * 64):
                if chunk:
                    tmp.write(chunk)
    os.replace(tmp.name, dest)


def unzip(archive: Path, target_dir: Path) -> None:
    target_dir.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(archive) as zipped:
        zipped.extractall(target_dir)


def load_json(path: Path) -> Any:
    """Read a UTF-8 JSON document, naming the file when it is missing."""
    if not path.is_file():
        raise FileNotFoundError(f"Missing JSON file {path}")
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def write_locale_database(database: LocaleDatabase, output_root: Path) -> List[Path]:
    """Write one ``<locale>.json`` file per locale and return the written paths."""
    output_root.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for locale, record in database.items():
        target = output_root / f"{locale}.json"
        target.write_text(json.dumps(record, ensure_ascii=False, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        written.append(target)
    return written


def load_locale_record(locale: str, root: Path) -> LocaleRecord:
    """Read back a record written by :func:`write_locale_database`."""
    payload = load_json(root / f"{locale}.json")
    if not isinstance(payload, dict) or "types" not in payload or "patterns" not in payload:
        raise TypeError(f"Unexpected payload for locale {locale} in {root}")
    return payload  # type: ignore[return-value]


__all__ = [
    "METADATA_SUFFIX",
    "download_stream",
    "load_json",
    "load_locale_record",
    "needs_download",
    "read_metadata",
    "sha256sum",
    "unzip",
    "write_locale_database",
    "write_metadata",
]
