from __future__ import annotations

import logging
import os
from pathlib import Path

import typer
from dotenv import load_dotenv

from pics.config import OrganiserConfig
from pics.errors import CountMismatchError, OrganiserError
from pics.organiser import FileOrganiser
from pics.runner import EXIT_ERROR, EXIT_MISMATCH, EXIT_OK, run_parse

app = typer.Typer(add_completion=False, help="Date-partitioned media archive organiser")

LOGGER = logging.getLogger("pics")


def _setup(verbose: bool) -> FileOrganiser:
    load_dotenv()
    level = "DEBUG" if verbose else os.getenv("PICS_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return FileOrganiser(OrganiserConfig.from_env(), logger=LOGGER)


@app.command()
def parse(
    source_dir: Path = typer.Argument(..., help="Flat directory of incoming media"),
    target_dir: Path = typer.Argument(..., help="Archive root receiving date buckets"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every file move"),
) -> None:
    """Move files into YYYY MM Month DD buckets and rename them sequentially."""
    organiser = _setup(verbose)
    try:
        report = run_parse(source_dir, target_dir, organiser, logger=LOGGER)
    except CountMismatchError as exc:
        LOGGER.error("File count mismatch source_files=%s target_files=%s", exc.source_count, exc.target_count)
        raise typer.Exit(code=EXIT_MISMATCH)
    except OrganiserError as exc:
        LOGGER.error("Parse failed: %s", exc)
        raise typer.Exit(code=EXIT_ERROR)

    LOGGER.info("Processing completed successfully files_processed=%s", report.source_count)
    raise typer.Exit(code=EXIT_OK)


@app.command()
def rename(
    directory: Path = typer.Argument(..., help="Bucket directory, e.g. '2023 06 June 15 Paris'"),
    name: str = typer.Argument(..., help="New free-text name; empty keeps only the date"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Rename a date bucket and re-stamp every image and video inside it."""
    organiser = _setup(verbose)
    try:
        organiser.rename_directory(directory, name)
    except OrganiserError as exc:
        LOGGER.error("Rename failed: %s", exc)
        raise typer.Exit(code=EXIT_ERROR)

    LOGGER.info("Rename completed successfully")


@app.command()
def count(root: Path = typer.Argument(..., help="Directory to count recursively")) -> None:
    """Print the number of non-hidden files under ROOT."""
    organiser = _setup(False)
    try:
        total = organiser.get_file_count(root)
    except OrganiserError as exc:
        LOGGER.error("Count failed: %s", exc)
        raise typer.Exit(code=EXIT_ERROR)
    typer.echo(str(total))


if __name__ == "__main__":
    app()
