"""Per-run failure log: a file handler that lives only as long as one pipeline call."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

RUN_LOGGER_NAME = "pdftext.run"

_FORMATTER = logging.Formatter(
    "%(asctime)s %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


@contextmanager
def open_run_log(log_file: str | Path | None) -> Iterator[logging.Logger | None]:
    """Yield a logger writing to log_file (appending), or None when no log file is configured."""
    if log_file is None:
        yield None
        return

    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(RUN_LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setLevel(logging.INFO)
    handler.setFormatter(_FORMATTER)
    logger.addHandler(handler)
    try:
        yield logger
    finally:
        logger.removeHandler(handler)
        handler.close()
