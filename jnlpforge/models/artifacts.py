"""Artifact models — classpath jars, staging pairs, descriptor assets, extras."""

from __future__ import annotations

from pathlib import Path, PurePath
from xml.etree import ElementTree as ET

from pydantic import BaseModel, ConfigDict, Field, field_validator


def check_file_name(value: str) -> str:
    """Reject anything that is not a single, plain path component."""
    if not value or value in (".", "..") or PurePath(value).name != value or "\\" in value:
        raise ValueError(f"must be a plain file name, got {value!r}")
    return value


class Artifact(BaseModel):
    """A resolved classpath jar, as handed over by artifact resolution.

    ``logical_name`` is the file name the jar gets in the output directory
    and the ``href`` it is referenced by in launch descriptors.
    """

    model_config = ConfigDict(frozen=True)

    source_path: Path
    logical_name: str
    is_main: bool = False
    byte_size: int = Field(default=0, ge=0)

    @field_validator("logical_name")
    @classmethod
    def _plain_name(cls, value: str) -> str:
        return check_file_name(value)


class StagingPair(BaseModel):
    """A planned copy from an artifact's source to ``output / logical_name``."""

    model_config = ConfigDict(frozen=True)

    source: Path
    target: Path


class DescriptorAsset(BaseModel):
    """The projection of an Artifact consumed by descriptor rendering."""

    model_config = ConfigDict(frozen=True)

    href: str
    is_main: bool
    byte_size: int

    def to_element(self) -> ET.Element:
        """Return ``<jar href=".." main="true|false" size="N"/>``."""
        return ET.Element(
            "jar",
            {
                "href": self.href,
                "main": "true" if self.is_main else "false",
                "size": str(self.byte_size),
            },
        )


class ExtraFile(BaseModel):
    """An auxiliary file copied verbatim into the output directory."""

    model_config = ConfigDict(frozen=True)

    source_path: Path
    relative_target_path: str

    @field_validator("relative_target_path")
    @classmethod
    def _inside_output(cls, value: str) -> str:
        parts = PurePath(value).parts
        if not parts or PurePath(value).is_absolute() or ".." in parts:
            raise ValueError(
                f"extra target must be a relative path inside the output "
                f"directory, got {value!r}"
            )
        return value

    @property
    def top_level_name(self) -> str:
        """First component of the target path, as seen in the output directory."""
        return PurePath(self.relative_target_path).parts[0]
