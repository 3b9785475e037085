"""Pydantic schemas for batch file processing: options, per-file outcomes, and run aggregates."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class ProcessingOptions(BaseModel):
    """Where results go, whether sources get archived, and where failures are logged."""

    output_dest: Path | None = None
    output_dir_dup: bool = False
    archive_dest: Path | None = None
    archive_dir_dup: bool = False
    log_file: Path | None = None

    @model_validator(mode="after")
    def _dup_requires_dest(self) -> "ProcessingOptions":
        if self.output_dir_dup and self.output_dest is None:
            raise ValueError("Cannot specify output_dir_dup without specifying output_dest.")
        if self.archive_dir_dup and self.archive_dest is None:
            raise ValueError("Cannot specify archive_dir_dup without specifying archive_dest.")
        return self

    @property
    def duplicates_dirs(self) -> bool:
        return self.output_dir_dup or self.archive_dir_dup


class FileOutcome(BaseModel):
    """One successfully processed file."""

    source_path: Path
    output_path: Path
    archive_path: Path | None = None

    def summary(self) -> str:
        text = f"Wrote {self.output_path}"
        if self.archive_path is not None:
            text += f" (archived to {self.archive_path})"
        return text


class FileFailure(BaseModel):
    """One file that could not be processed."""

    source_path: Path
    error: str
    error_type: str


class RunResult(BaseModel):
    """Aggregate of a directory run."""

    root: Path
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
    outcomes: list[FileOutcome] = Field(default_factory=list)
    failures: list[FileFailure] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed

    def record_success(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)
        self.succeeded += 1

    def record_failure(self, failure: FileFailure) -> None:
        self.failures.append(failure)
        self.failed += 1

    def summary(self) -> str:
        return f"Successfully performed the operation on {self.succeeded} files. ({self.failed} failures)"
