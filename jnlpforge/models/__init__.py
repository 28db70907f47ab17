"""jnlpforge data models — all Pydantic v2, all frozen (immutable)."""

from jnlpforge.models.artifacts import (
    Artifact,
    DescriptorAsset,
    ExtraFile,
    StagingPair,
)
from jnlpforge.models.config import (
    BuildConfig,
    DescriptorConfig,
    GenConfig,
    KeyConfig,
    RenderFn,
)
from jnlpforge.models.reports import BuildReport

__all__ = [
    # artifacts
    "Artifact",
    "StagingPair",
    "DescriptorAsset",
    "ExtraFile",
    # config
    "KeyConfig",
    "GenConfig",
    "DescriptorConfig",
    "RenderFn",
    "BuildConfig",
    # reports
    "BuildReport",
]
