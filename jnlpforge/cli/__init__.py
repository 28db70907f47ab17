"""jnlpforge CLI — Typer-based command-line interface.

Provides the ``jnlpforge`` command with subcommands for running a build
pass, previewing which jars are stale, and generating the signing key.

All output uses Rich for formatted terminal display.
"""
