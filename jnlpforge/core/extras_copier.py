"""Verbatim copy of auxiliary files (icons, splash screens, html pages)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from jnlpforge.core.file_ops import copy_file
from jnlpforge.models.artifacts import ExtraFile

logger = logging.getLogger(__name__)


class ExtrasCopier:
    """Copies every extra into *output* on every pass, without freshness checks."""

    def __init__(self, output: Path) -> None:
        self._output = Path(output)

    def copy(self, extras: Sequence[ExtraFile]) -> list[Path]:
        logger.info("copying extras")
        return [
            copy_file(extra.source_path, self._output / extra.relative_target_path)
            for extra in extras
        ]
