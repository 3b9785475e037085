from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ExtractionError(RuntimeError):
    """Raised when an extractor cannot produce text for a source file."""


class EmptyExtractionError(ExtractionError):
    """Raised when extraction succeeded but produced no usable text."""


class Extractor(ABC):
    """Common interface for turning one source document into plain text."""

    suffixes: tuple[str, ...] = ()

    def supports(self, path: str | Path) -> bool:
        return Path(path).suffix.lower() in self.suffixes

    @abstractmethod
    def extract(self, path: str | Path) -> str:
        """Return the extracted text for path. Raises ExtractionError on failure."""
        raise NotImplementedError
