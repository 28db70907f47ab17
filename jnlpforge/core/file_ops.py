"""File-system primitives used by the build components.

Every ``OSError`` is translated into ``BuildIOError`` carrying the operation
and the path, so a failed pass reports what it was doing and where.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from jnlpforge.core.errors import BuildIOError

logger = logging.getLogger(__name__)


def copy_file(source: Path, target: Path) -> Path:
    """Copy *source* to *target*, preserving its modification time."""
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, target)
    except OSError as exc:
        raise BuildIOError("copy", source, exc.strerror or str(exc)) from exc
    return target


def write_text(target: Path, text: str) -> Path:
    """Write *text* as UTF-8, replacing any existing file."""
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise BuildIOError("write", target, exc.strerror or str(exc)) from exc
    return target


def delete_path(path: Path) -> None:
    """Delete a file, symlink or directory tree."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise BuildIOError("delete", path, exc.strerror or str(exc)) from exc
    logger.debug("deleted %s", path)


def list_children(directory: Path) -> list[Path]:
    """Return the immediate children of *directory*, sorted by name."""
    try:
        return sorted(directory.iterdir())
    except OSError as exc:
        raise BuildIOError("list", directory, exc.strerror or str(exc)) from exc


def ensure_directory(directory: Path) -> Path:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BuildIOError("create directory", directory, exc.strerror or str(exc)) from exc
    return directory
