"""Manifest extension of freshly staged jars via ``jar umf``."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from jnlpforge.core.errors import ManifestMergeFailed
from jnlpforge.core.fanout import run_parallel
from jnlpforge.core.process_runner import ProcessRunner

logger = logging.getLogger(__name__)


class ManifestExtender:
    """Merges a manifest file into each fresh jar, one task per jar.

    Parameters
    ----------
    runner:
        Process runner used to invoke the ``jar`` tool.
    manifest:
        Manifest file to merge. ``None`` turns the step into a no-op.
    jar_tool:
        Name or path of the ``jar`` executable.
    max_workers:
        Upper bound on concurrently running ``jar`` processes.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        manifest: Path | None,
        *,
        jar_tool: str = "jar",
        max_workers: int = 8,
    ) -> None:
        self._runner = runner
        self._manifest = manifest
        self._jar_tool = jar_tool
        self._max_workers = max_workers

    def extend(self, jars: Sequence[Path]) -> list[Path]:
        """Extend the manifest of every jar; return the jars rewritten."""
        manifest = self._manifest
        if manifest is None:
            logger.info("missing manifest, leaving jar manifests unchanged")
            return []
        logger.info("extending jar manifests")
        return run_parallel(
            lambda jar: self._extend_one(manifest, jar),
            list(jars),
            max_workers=self._max_workers,
            name="manifest",
        )

    def _extend_one(self, manifest: Path, jar: Path) -> Path:
        rc = self._runner.run(
            self._jar_tool,
            ["umf", str(manifest.absolute()), str(jar.absolute())],
        )
        if rc != 0:
            raise ManifestMergeFailed(rc, jar)
        return jar
