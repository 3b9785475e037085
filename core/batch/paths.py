"""Output and archive path computation, with optional duplication of the input subtree."""

from __future__ import annotations

from pathlib import Path

OUTPUT_SUFFIX = ".txt"


def subtree_offset(file_path: Path, root: Path | None) -> Path:
    """
    Directory of file_path relative to the run's input root.

    Falls back to everything after the first path segment equal to the root's basename
    (e.g. when the file was reached through a symlink), and to an empty offset when
    neither applies.
    """
    if root is None:
        return Path()
    parent = file_path.parent
    try:
        return parent.relative_to(root)
    except ValueError:
        pass
    parts = parent.parts
    if root.name and root.name in parts:
        return Path(*parts[parts.index(root.name) + 1:])
    return Path()


def _destination_dir(file_path: Path, dest: Path, dir_dup: bool, root: Path | None) -> Path:
    if dir_dup:
        return dest / subtree_offset(file_path, root)
    return dest


def output_file_path(
    file_path: Path,
    output_dest: Path | None = None,
    output_dir_dup: bool = False,
    root: Path | None = None,
) -> Path:
    """Where the text for file_path is written: beside the source unless output_dest is set."""
    name = file_path.stem + OUTPUT_SUFFIX
    if output_dest is None:
        return file_path.parent / name
    return _destination_dir(file_path, output_dest, output_dir_dup, root) / name


def archive_dir_path(
    file_path: Path,
    archive_dest: Path,
    archive_dir_dup: bool = False,
    root: Path | None = None,
) -> Path:
    return _destination_dir(file_path, archive_dest, archive_dir_dup, root)
