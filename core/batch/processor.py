"""Batch driver: run an extractor over a file or a directory tree, write results, archive sources."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any

from core.batch.paths import archive_dir_path, output_file_path
from core.batch.run_log import open_run_log
from core.batch.schemas import FileFailure, FileOutcome, ProcessingOptions, RunResult
from core.batch.walker import discover_files
from core.extract.base import EmptyExtractionError, Extractor
from core.extract.pymupdf_extractor import PyMuPDFExtractor

log = logging.getLogger(__name__)


def _coerce_options(options: ProcessingOptions | dict[str, Any] | None) -> ProcessingOptions:
    if options is None:
        return ProcessingOptions()
    if isinstance(options, ProcessingOptions):
        return options
    return ProcessingOptions.model_validate(options)


def _check_destination(label: str, dest: Path | None) -> None:
    if dest is None:
        return
    if not dest.exists():
        raise FileNotFoundError(f"Could not locate {label}: {dest}.")
    if not dest.is_dir():
        raise NotADirectoryError(f"{label} is not a directory: {dest}")


class FileProcessor:
    """
    Applies one Extractor to a single file or to every supported file under a directory.

    For each file: extract text, write <stem>.txt to the output location, then move the
    source into the archive location when one is configured. Directory runs never stop on
    a per-file failure; the failure is logged and counted instead.
    """

    def __init__(self, extractor: Extractor) -> None:
        self.extractor = extractor

    def process_file(
        self,
        path: str | Path,
        options: ProcessingOptions | dict[str, Any] | None = None,
        log_handle: logging.Logger | None = None,
    ) -> FileOutcome:
        """Process one file. Every failure propagates to the caller."""
        options = _coerce_options(options)
        if options.duplicates_dirs:
            raise ValueError("Cannot duplicate directory for a file.")

        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Could not locate input source: {file_path}.")
        if not file_path.is_file():
            raise ValueError(f"Argument is not a file: {file_path}")
        if not self.extractor.supports(file_path):
            raise ValueError(f"Unsupported file type ({', '.join(self.extractor.suffixes)}): {file_path}")
        _check_destination("output_dest", options.output_dest)
        _check_destination("archive_dest", options.archive_dest)

        with open_run_log(None if log_handle else options.log_file) as run_log:
            run_log = log_handle or run_log
            try:
                outcome = self._process_one(file_path, options, root=None)
            except Exception as e:
                if run_log is not None:
                    run_log.error("Error processing %s: %s", file_path, e)
                raise
        log.info(outcome.summary())
        return outcome

    def process_dir(
        self,
        path: str | Path,
        options: ProcessingOptions | dict[str, Any] | None = None,
        log_handle: logging.Logger | None = None,
    ) -> RunResult:
        """Process every supported file under a directory; per-file failures are counted, not raised."""
        options = _coerce_options(options)
        root = Path(path)
        if not root.exists():
            raise FileNotFoundError(f"Could not locate input source: {root}.")
        if not root.is_dir():
            raise NotADirectoryError(f"Argument is not a directory: {root}")
        _check_destination("output_dest", options.output_dest)
        _check_destination("archive_dest", options.archive_dest)

        candidates, skipped = discover_files(root, self.extractor.supports)
        result = RunResult(root=root, skipped=len(skipped))
        log.info("Processing %d files under %s (%d skipped)", len(candidates), root, len(skipped))

        written: set[Path] = set()
        with open_run_log(None if log_handle else options.log_file) as run_log:
            run_log = log_handle or run_log or log
            for file_path in candidates:
                item = self._try_process(file_path, options, root)
                if isinstance(item, FileFailure):
                    run_log.error("Error processing %s: %s", item.source_path, item.error)
                    result.record_failure(item)
                    continue
                if item.output_path in written:
                    log.warning("Overwriting output written earlier in this run: %s", item.output_path)
                written.add(item.output_path)
                result.record_success(item)

        log.info(result.summary())
        return result

    def _try_process(self, file_path: Path, options: ProcessingOptions, root: Path) -> FileOutcome | FileFailure:
        try:
            return self._process_one(file_path, options, root)
        except Exception as e:
            return FileFailure(source_path=file_path, error=str(e), error_type=type(e).__name__)

    def _process_one(self, file_path: Path, options: ProcessingOptions, root: Path | None) -> FileOutcome:
        text = self.extractor.extract(file_path)
        if not text:
            raise EmptyExtractionError(f"Extraction produced no text: {file_path}")

        output_path = output_file_path(file_path, options.output_dest, options.output_dir_dup, root)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")

        archive_path = None
        if options.archive_dest is not None:
            archive_dir = archive_dir_path(file_path, options.archive_dest, options.archive_dir_dup, root)
            archive_dir.mkdir(parents=True, exist_ok=True)
            archive_path = archive_dir / file_path.name
            shutil.move(str(file_path), str(archive_path))

        return FileOutcome(source_path=file_path, output_path=output_path, archive_path=archive_path)


def process_file(
    path: str | Path,
    options: ProcessingOptions | dict[str, Any] | None = None,
    log_handle: logging.Logger | None = None,
) -> FileOutcome:
    """Convert one PDF to text with the default PyMuPDF extractor."""
    return FileProcessor(PyMuPDFExtractor()).process_file(path, options, log_handle)


def process_dir(
    path: str | Path,
    options: ProcessingOptions | dict[str, Any] | None = None,
    log_handle: logging.Logger | None = None,
) -> RunResult:
    """Convert every PDF under a directory to text with the default PyMuPDF extractor."""
    return FileProcessor(PyMuPDFExtractor()).process_dir(path, options, log_handle)
