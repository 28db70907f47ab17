"""Launch descriptor generation.

Descriptors are cheap, so they are rewritten on every pass regardless of
whether any jar changed. The body comes from each DescriptorConfig's render
strategy; this module only orders the assets, serializes and writes.

@see https://docs.oracle.com/javase/tutorial/deployment/deploymentInDepth/jnlpFileSyntax.html
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from xml.etree import ElementTree as ET

from jnlpforge.core.file_ops import write_text
from jnlpforge.models.artifacts import Artifact, DescriptorAsset
from jnlpforge.models.config import DescriptorConfig

logger = logging.getLogger(__name__)

XML_PROLOG = '<?xml version="1.0" encoding="utf-8"?>'


def order_assets(artifacts: Sequence[Artifact]) -> list[DescriptorAsset]:
    """Project artifacts to descriptor assets, main jars first.

    ``sorted`` is stable, so artifacts with equal main-ness keep their
    classpath order.
    """
    return [
        DescriptorAsset(
            href=artifact.logical_name,
            is_main=artifact.is_main,
            byte_size=artifact.byte_size,
        )
        for artifact in sorted(artifacts, key=lambda a: not a.is_main)
    ]


def render_document(config: DescriptorConfig, assets: Sequence[DescriptorAsset]) -> str:
    """Render one descriptor, prolog included."""
    body = config.render(config.file_name, assets)
    if isinstance(body, ET.Element):
        body = ET.tostring(body, encoding="unicode")
    elif not isinstance(body, str):
        raise TypeError(
            f"render for {config.file_name} returned {type(body).__name__}, "
            "expected an Element or str"
        )
    return f"{XML_PROLOG}\n{body}"


class DescriptorGenerator:
    """Writes every configured descriptor into *output*."""

    def __init__(self, output: Path) -> None:
        self._output = Path(output)

    def generate(
        self,
        artifacts: Sequence[Artifact],
        configs: Sequence[DescriptorConfig],
    ) -> list[Path]:
        logger.info("creating jnlp descriptor(s)")
        assets = order_assets(artifacts)
        written: list[Path] = []
        for config in configs:
            target = self._output / config.file_name
            write_text(target, render_document(config, assets))
            written.append(target)
        return written
