"""CLI settings: defaults, overridden by PDFTEXT_* environment variables, then by a JSON config file."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel

ENV_PREFIX = "PDFTEXT_"
_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    results_dir: Path = Path("text_results")
    archive_dir: Path = Path("archive")
    logs_dir: Path = Path("logs")
    log_file_name: str = "extract-text-from-pdfs.log"
    archive: bool = True
    dir_dup: bool = True

    @property
    def log_file(self) -> Path:
        return self.logs_dir / self.log_file_name

    def ensure_dirs(self) -> None:
        """Creates the results, archive and logs directories if they don't exist."""
        self.results_dir.mkdir(parents=True, exist_ok=True)
        if self.archive:
            self.archive_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for name in Settings.model_fields:
        raw = os.environ.get(ENV_PREFIX + name.upper())
        if raw is None or raw == "":
            continue
        if name in ("archive", "dir_dup"):
            overrides[name] = raw.strip().lower() in _TRUE_VALUES
        else:
            overrides[name] = raw
    return overrides


def _load_json(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise FileNotFoundError(f"Config not found: {path}")
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config format in {path}: expected a JSON object")
    return raw


def load_settings(config_path: str | Path | None = None) -> Settings:
    values: dict[str, Any] = _env_overrides()
    if config_path:
        values.update(_load_json(Path(config_path)))
    return Settings.model_validate(values)
