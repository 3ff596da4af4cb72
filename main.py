from pathlib import Path
from typing import List, Optional

import typer
from InquirerPy import inquirer

from src.displaynames import ExtractionRequest, prepare_display_names
from src.displaynames.config import CLDR, DEFAULT_MAX_WORKERS, DEFAULT_OUTPUT_ROOT, DEFAULT_RAW_ROOT
from src.displaynames.sources import CldrDataSource, download_cldr, open_cldr_source

app = typer.Typer()


def _pick_locales(raw_root: Path, version: str, download: bool) -> List[str]:
    source = CldrDataSource(download_cldr(raw_root, version)) if download else open_cldr_source(raw_root, version)
    picked = inquirer.fuzzy(
        message="Select locales to extract (tab to mark, enter to confirm):",
        choices=source.available_locales(),
        multiselect=True,
    ).execute()
    return list(picked or [])


@app.command()
def cldr(
    version: str = typer.Option(CLDR["version"], "--version", help="CLDR JSON release tag."),
    force: bool = typer.Option(False, "--force", help="Redownload even if the archive exists."),
    raw_root: Path = typer.Option(
        DEFAULT_RAW_ROOT,
        "--raw-root",
        exists=False,
        file_okay=False,
        dir_okay=True,
        writable=True,
        help="Directory to store the CLDR release.",
    ),
) -> None:
    """
    Download and unpack the CLDR JSON release without extracting anything.
    """
    root = download_cldr(raw_root, version, force=force)
    typer.echo(f"[cldr] Packages available under {root}")


@app.command()
def extract(
    locale: List[str] = typer.Option(
        [],
        "--locale",
        "-l",
        help="Locale(s) to extract; defaults to CLDR's available locales.",
    ),
    discover: bool = typer.Option(
        False,
        "--discover",
        help="Extract every locale directory found in cldr-localenames-full instead of the available list.",
    ),
    pick: bool = typer.Option(False, "--pick", help="Choose locales interactively."),
    skip_failures: bool = typer.Option(
        False,
        "--skip-failures",
        help="Leave out locales that fail instead of aborting the whole run.",
    ),
    workers: int = typer.Option(DEFAULT_MAX_WORKERS, "--workers", help="Number of locales extracted in parallel."),
    version: Optional[str] = typer.Option(None, "--version", help="CLDR JSON release tag."),
    download: bool = typer.Option(True, "--download/--no-download", help="Fetch the CLDR release when missing."),
    force: bool = typer.Option(False, "--force", help="Redownload even if the archive exists."),
    raw_root: Path = typer.Option(
        DEFAULT_RAW_ROOT,
        "--raw-root",
        exists=False,
        file_okay=False,
        dir_okay=True,
        writable=True,
        help="Directory holding the CLDR release.",
    ),
    output_root: Path = typer.Option(
        DEFAULT_OUTPUT_ROOT,
        "--output-root",
        exists=False,
        file_okay=False,
        dir_okay=True,
        writable=True,
        help="Directory receiving one JSON file per locale.",
    ),
) -> None:
    """
    Normalize CLDR display names into per-locale Intl.DisplayNames records.
    """
    if pick:
        locale = _pick_locales(raw_root, version or CLDR["version"], download)
        if not locale:
            raise typer.BadParameter("No locales selected.")

    try:
        request = ExtractionRequest.from_flags(
            locales=locale,
            discover=discover,
            skip_failures=skip_failures,
            workers=workers,
            version=version,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        prepare_display_names(
            request,
            raw_root=raw_root,
            output_root=output_root,
            force=force,
            download=download,
        )
    except FileNotFoundError as exc:
        raise typer.BadParameter(str(exc)) from exc


if __name__ == "__main__":
    app()
