"""Build pass report — what a single pass touched in the output directory."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class BuildReport(BaseModel):
    """Summary of one build pass.

    ``staged`` lists every artifact target the pass accounts for, ``fresh``
    only those actually copied this time. ``manifests_extended`` and
    ``signed`` are always subsets of ``fresh``.
    """

    model_config = ConfigDict(frozen=True)

    output: Path
    staged: list[Path] = []
    fresh: list[Path] = []
    manifests_extended: list[Path] = []
    signed: list[Path] = []
    timestamped: bool = False
    descriptors: list[Path] = []
    extras: list[Path] = []
    deleted: list[Path] = []
    finished_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def is_noop(self) -> bool:
        """Whether no jar was copied, rewritten or signed."""
        return not self.fresh
