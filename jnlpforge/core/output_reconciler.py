"""Output directory cleanup.

After a pass has staged jars, written descriptors and copied extras, every
other top-level entry of the output directory is obsolete: a jar dropped
from the classpath, a renamed descriptor, a leftover from an older layout.
Obsolete entries are deleted recursively, without confirmation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from jnlpforge.core.file_ops import delete_path, list_children

logger = logging.getLogger(__name__)


class OutputReconciler:
    """Keeps *output* in sync with what the current configuration produces."""

    def __init__(self, output: Path) -> None:
        self._output = Path(output)

    def top_level_names(self, keep: Iterable[Path]) -> set[str]:
        """Names of the output children that contain (or are) a kept path.

        A nested extra such as ``icons/app.png`` keeps the whole ``icons``
        entry alive.
        """
        names: set[str] = set()
        for path in keep:
            try:
                relative = Path(path).relative_to(self._output)
            except ValueError:
                logger.debug("ignoring %s, not inside %s", path, self._output)
                continue
            if relative.parts:
                names.add(relative.parts[0])
        return names

    def obsolete(self, keep: Iterable[Path]) -> list[Path]:
        kept = self.top_level_names(keep)
        return [child for child in list_children(self._output) if child.name not in kept]

    def reconcile(self, keep: Iterable[Path]) -> list[Path]:
        """Delete every top-level entry not covered by *keep*; return them."""
        logger.info("cleaning up")
        obsolete = self.obsolete(keep)
        for path in obsolete:
            delete_path(path)
        if obsolete:
            logger.info("removed %d obsolete entries", len(obsolete))
        return obsolete
