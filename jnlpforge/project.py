"""Project file loading — ``jnlpforge.toml`` or ``[tool.jnlpforge]``.

Relative paths are resolved against the directory holding the project file,
so a build behaves the same from any working directory. Descriptors declared
in the file are rendered with ``JnlpTemplate``.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from jnlpforge.core.classpath import ClasspathEntry, resolve_classpath
from jnlpforge.core.errors import ProjectFileError
from jnlpforge.descriptors.jnlp import JnlpTemplate
from jnlpforge.models.artifacts import ExtraFile
from jnlpforge.models.config import BuildConfig, GenConfig, KeyConfig

logger = logging.getLogger(__name__)


class DescriptorEntry(JnlpTemplate):
    """A ``[[descriptors]]`` table: target file name plus template fields."""

    file_name: str


class ExtraEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Path
    target: str


class ProjectFile(BaseModel):
    """Raw shape of the project file, before paths are resolved."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    output: Path | None = None
    manifest: Path | None = None
    use_tsa: bool | None = None
    artifacts: list[ClasspathEntry] = []
    key: KeyConfig | None = None
    gen: GenConfig | None = None
    descriptors: list[DescriptorEntry] = []
    extras: list[ExtraEntry] = []


def read_project_table(path: Path) -> dict[str, Any]:
    """Return the jnlpforge table of *path*.

    For ``pyproject.toml`` this is ``[tool.jnlpforge]``; any other file is
    read as a whole.
    """
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ProjectFileError(f"project file not found: {path}") from exc
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ProjectFileError(f"cannot read project file {path}: {exc}") from exc

    if path.name == "pyproject.toml":
        table = data.get("tool", {}).get("jnlpforge")
        if table is None:
            raise ProjectFileError(f"{path} has no [tool.jnlpforge] table")
        return table
    return data


def _under(base: Path, path: Path) -> Path:
    return path if path.is_absolute() else base / path


def load_project(
    path: Path,
    *,
    output: Path | None = None,
    default_output: Path = Path("target/webstart"),
    resolve_artifacts: bool = True,
) -> BuildConfig:
    """Load *path* into a BuildConfig.

    Parameters
    ----------
    path:
        The project file.
    output:
        Overrides the file's ``output``.
    default_output:
        Used when neither the file nor *output* names an output directory.
    resolve_artifacts:
        Read jar sizes from disk. ``keygen`` skips this so it can run before
        the jars are built.
    """
    try:
        project = ProjectFile.model_validate(read_project_table(path))
    except ValidationError as exc:
        raise ProjectFileError(f"invalid project file {path}:\n{exc}") from exc

    base = path.parent
    key = project.key
    if key is not None:
        key = key.model_copy(update={"key_store": _under(base, key.key_store)})

    entries = [
        entry.model_copy(update={"path": _under(base, entry.path)})
        for entry in project.artifacts
    ]
    artifacts = resolve_classpath(entries) if resolve_artifacts else []

    if output is None:
        output = _under(base, project.output or default_output)
    logger.debug("loaded project %s (%d artifact entries)", path, len(entries))

    try:
        return BuildConfig(
            output=output,
            artifacts=artifacts,
            key_config=key,
            gen_config=project.gen,
            use_tsa=project.use_tsa,
            descriptors=[
                JnlpTemplate.model_validate(
                    entry.model_dump(exclude={"file_name"})
                ).descriptor(entry.file_name)
                for entry in project.descriptors
            ],
            manifest=_under(base, project.manifest) if project.manifest else None,
            extras=[
                ExtraFile(
                    source_path=_under(base, extra.source),
                    relative_target_path=extra.target,
                )
                for extra in project.extras
            ],
        )
    except ValidationError as exc:
        raise ProjectFileError(f"invalid project file {path}:\n{exc}") from exc
