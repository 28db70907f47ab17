"""Incremental staging of classpath jars into the output directory.

A jar is copied only when its source is strictly newer than the staged
copy, or when there is no staged copy yet. Copies keep the source's
modification time, so a second pass over unchanged sources copies nothing
and therefore triggers no manifest rewrite and no signing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from jnlpforge.core.errors import BuildIOError
from jnlpforge.core.file_ops import copy_file
from jnlpforge.models.artifacts import Artifact, StagingPair

logger = logging.getLogger(__name__)


class AssetStager:
    """Plans and performs jar copies into *output*.

    Parameters
    ----------
    output:
        The build output directory. Targets are ``output / logical_name``.
    """

    def __init__(self, output: Path) -> None:
        self._output = Path(output)

    def plan(self, artifacts: Sequence[Artifact]) -> list[StagingPair]:
        """Map every artifact to its staging pair, in artifact order."""
        return [
            StagingPair(
                source=artifact.source_path,
                target=self._output / artifact.logical_name,
            )
            for artifact in artifacts
        ]

    @staticmethod
    def is_stale(pair: StagingPair) -> bool:
        """Whether *pair* needs copying: target missing or source strictly newer."""
        try:
            source_mtime = pair.source.stat().st_mtime_ns
        except OSError as exc:
            raise BuildIOError("stat", pair.source, exc.strerror or str(exc)) from exc
        try:
            target_mtime = pair.target.stat().st_mtime_ns
        except FileNotFoundError:
            return True
        except OSError as exc:
            raise BuildIOError("stat", pair.target, exc.strerror or str(exc)) from exc
        return source_mtime > target_mtime

    def stale(self, pairs: Sequence[StagingPair]) -> list[StagingPair]:
        return [pair for pair in pairs if self.is_stale(pair)]

    def stage(self, artifacts: Sequence[Artifact]) -> list[Path]:
        """Copy stale artifacts and return the targets actually copied."""
        logger.info("copying assets")
        to_copy = self.stale(self.plan(artifacts))
        fresh = [copy_file(pair.source, pair.target) for pair in to_copy]
        logger.debug(
            "staged %d of %d jar(s) into %s", len(fresh), len(artifacts), self._output
        )
        return fresh
