"""Minimal artifact resolution for explicitly listed jars.

Build tools normally hand over a resolved classpath. For the command line
the classpath is spelled out in the project file instead; this module turns
those entries into ``Artifact`` tuples, reading each jar's size from disk.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from jnlpforge.core.errors import BuildIOError
from jnlpforge.models.artifacts import Artifact


class ClasspathEntry(BaseModel):
    """A jar on the classpath as written in the project file."""

    model_config = ConfigDict(frozen=True)

    path: Path
    main: bool = False
    name: str | None = None


def resolve_artifact(entry: ClasspathEntry) -> Artifact:
    try:
        size = entry.path.stat().st_size
    except OSError as exc:
        raise BuildIOError("stat", entry.path, exc.strerror or str(exc)) from exc
    return Artifact(
        source_path=entry.path,
        logical_name=entry.name or entry.path.name,
        is_main=entry.main,
        byte_size=size,
    )


def resolve_classpath(entries: Iterable[ClasspathEntry]) -> list[Artifact]:
    """Resolve entries in order; the order is the classpath order."""
    return [resolve_artifact(entry) for entry in entries]
