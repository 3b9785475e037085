"""Recursive discovery of candidate files under an input root."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

log = logging.getLogger(__name__)


def discover_files(root: Path, accept: Callable[[Path], bool]) -> tuple[list[Path], list[Path]]:
    """
    Walk root recursively and split regular files into (candidates, skipped).

    Symlinked directories are not followed. An unreadable root raises; unreadable
    subdirectories are logged and left out.
    """
    candidates: list[Path] = []
    skipped: list[Path] = []

    def _on_error(err: OSError) -> None:
        if err.filename is not None and Path(err.filename) == root:
            raise err
        log.warning("Skipping unreadable directory %s: %s", err.filename, err.strerror)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if not path.is_file():
                continue
            if accept(path):
                candidates.append(path)
            else:
                skipped.append(path)
    return candidates, skipped
