"""Render strategies for launch descriptors."""

from jnlpforge.descriptors.jnlp import JnlpTemplate

__all__ = ["JnlpTemplate"]
