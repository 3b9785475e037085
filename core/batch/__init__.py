"""Batch file processing: walk inputs, extract text, place outputs, archive sources."""

from core.batch.processor import FileProcessor, process_dir, process_file
from core.batch.schemas import FileFailure, FileOutcome, ProcessingOptions, RunResult

__all__ = [
    "FileFailure",
    "FileOutcome",
    "FileProcessor",
    "ProcessingOptions",
    "RunResult",
    "process_dir",
    "process_file",
]
