"""CLI: convert PDFs (single files or whole directory trees) to text files and archive the sources."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer
from dotenv import load_dotenv

from core.batch import ProcessingOptions, process_dir, process_file
from pipeline.settings import Settings, load_settings

# Load .env from project root so PDFTEXT_* settings are picked up
_project_root = Path(__file__).resolve().parent.parent
load_dotenv(_project_root / ".env")

app = typer.Typer(add_completion=False)

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    env_level = os.environ.get("LOG_LEVEL", "").upper()
    if env_level in LOG_LEVELS:
        level = LOG_LEVELS[env_level]
    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging"),
) -> None:
    """pdftext: batch PDF-to-text conversion with optional archiving."""
    _configure_logging(verbose)


def _file_options(settings: Settings) -> ProcessingOptions:
    return ProcessingOptions(
        output_dest=settings.results_dir,
        archive_dest=settings.archive_dir if settings.archive else None,
        log_file=settings.log_file,
    )


def _dir_options(settings: Settings) -> ProcessingOptions:
    return ProcessingOptions(
        output_dest=settings.results_dir,
        output_dir_dup=settings.dir_dup,
        archive_dest=settings.archive_dir if settings.archive else None,
        archive_dir_dup=settings.dir_dup and settings.archive,
        log_file=settings.log_file,
    )


@app.command()
def run(
    paths: list[str] = typer.Argument(..., help="PDF files and/or directories of PDFs to process"),
    results_dir: str | None = typer.Option(None, "--results-dir", help="Directory for the .txt results (default: text_results)"),
    archive_dir: str | None = typer.Option(None, "--archive-dir", help="Directory processed PDFs are moved to (default: archive)"),
    logs_dir: str | None = typer.Option(None, "--logs-dir", help="Directory for the failure log (default: logs)"),
    no_archive: bool = typer.Option(False, "--no-archive", help="Leave processed PDFs where they are"),
    no_dir_dup: bool = typer.Option(False, "--no-dir-dup", help="Do not mirror input subdirectories in results/archive"),
    config: str | None = typer.Option(None, "--config", help="JSON settings file (keys: results_dir, archive_dir, logs_dir, log_file_name, archive, dir_dup)"),
) -> None:
    """Extract text from each PDF argument, or from every PDF under each directory argument."""
    try:
        settings = load_settings(config)
    except (OSError, ValueError) as e:
        typer.echo(f"Invalid config: {e}", err=True)
        raise typer.Exit(1)

    overrides: dict[str, object] = {}
    if results_dir:
        overrides["results_dir"] = Path(results_dir)
    if archive_dir:
        overrides["archive_dir"] = Path(archive_dir)
    if logs_dir:
        overrides["logs_dir"] = Path(logs_dir)
    if no_archive:
        overrides["archive"] = False
    if no_dir_dup:
        overrides["dir_dup"] = False
    settings = settings.model_copy(update=overrides)

    for arg in paths:
        path = Path(arg)
        if path.is_file():
            settings.ensure_dirs()
            try:
                outcome = process_file(path, _file_options(settings))
            except Exception as e:
                typer.echo(f"Failed to process {path}: {e}", err=True)
                raise typer.Exit(1)
            typer.echo(outcome.summary())
        elif path.is_dir():
            settings.ensure_dirs()
            try:
                result = process_dir(path, _dir_options(settings))
            except (OSError, ValueError) as e:
                typer.echo(f"Failed to process {path}: {e}", err=True)
                raise typer.Exit(1)
            typer.echo(result.summary())
            if result.failed:
                typer.echo(f"  failures logged to: {settings.log_file}")
        else:
            typer.echo(f"Invalid argument: {arg}", err=True)
            raise typer.Exit(1)


if __name__ == "__main__":
    app()
