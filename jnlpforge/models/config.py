"""Signing, key generation, descriptor and build configuration models."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from jnlpforge.models.artifacts import (
    Artifact,
    DescriptorAsset,
    ExtraFile,
    check_file_name,
)

# (file_name, ordered_assets) -> ElementTree element or serialized XML body
RenderFn = Callable[[str, Sequence[DescriptorAsset]], Any]


class KeyConfig(BaseModel):
    """Signing identity: keystore, credentials and optional TSA endpoint."""

    model_config = ConfigDict(frozen=True)

    key_store: Path
    store_password: str = Field(repr=False)
    alias: str
    key_password: str = Field(repr=False)
    tsa_url: str | None = None


class GenConfig(BaseModel):
    """Parameters for generating a new signing key."""

    model_config = ConfigDict(frozen=True)

    distinguished_name: str
    validity_days: int = Field(gt=0)


class DescriptorConfig(BaseModel):
    """One launch descriptor to write: its file name and render strategy."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    render: RenderFn

    @field_validator("file_name")
    @classmethod
    def _plain_name(cls, value: str) -> str:
        return check_file_name(value)


class BuildConfig(BaseModel):
    """Everything a single build pass consumes.

    ``use_tsa`` left at ``None`` means "derive it": timestamping is used
    exactly when the KeyConfig carries a ``tsa_url``. The derivation runs
    against the KeyConfig this object ends up with, so a KeyConfig replaced
    via ``model_copy(update=...)`` is never judged by a stale default.
    """

    model_config = ConfigDict(frozen=True)

    output: Path
    artifacts: list[Artifact] = []
    key_config: KeyConfig | None = None
    gen_config: GenConfig | None = None
    use_tsa: bool | None = None
    descriptors: list[DescriptorConfig] = []
    manifest: Path | None = None
    extras: list[ExtraFile] = []

    @model_validator(mode="after")
    def _disjoint_outputs(self) -> BuildConfig:
        seen: dict[str, str] = {}

        def claim(name: str, owner: str) -> None:
            if name in seen:
                raise ValueError(
                    f"output entry {name!r} is produced by both {seen[name]} and {owner}"
                )
            seen[name] = owner

        for artifact in self.artifacts:
            claim(artifact.logical_name, f"artifact {artifact.source_path}")
        for descriptor in self.descriptors:
            claim(descriptor.file_name, f"descriptor {descriptor.file_name}")
        # Several extras may share a directory, but not a file
        extra_targets: set[str] = set()
        for extra in self.extras:
            if extra.relative_target_path in extra_targets:
                raise ValueError(
                    f"extra target {extra.relative_target_path!r} is listed twice"
                )
            extra_targets.add(extra.relative_target_path)
        for top_level in {extra.top_level_name for extra in self.extras}:
            claim(top_level, "extras")
        return self

    @property
    def effective_use_tsa(self) -> bool:
        """``use_tsa`` if set explicitly, else whether a TSA URL is configured."""
        if self.use_tsa is not None:
            return self.use_tsa
        return self.key_config is not None and self.key_config.tsa_url is not None
