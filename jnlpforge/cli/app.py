"""Main Typer application — imports and registers all CLI commands.

Entry point: ``jnlpforge`` (configured via pyproject.toml console_scripts).

Commands: build, plan, keygen.
"""

from __future__ import annotations

import typer

from jnlpforge.cli.commands.build import build_cmd
from jnlpforge.cli.commands.keygen import keygen_cmd
from jnlpforge.cli.commands.plan import plan_cmd

app = typer.Typer(
    name="jnlpforge",
    help="jnlpforge: incremental, signed Java Web Start distributions.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="build", help="Build the webstart output directory.")(build_cmd)
app.command(name="plan", help="Show which jars the next build would copy.")(plan_cmd)
app.command(name="keygen", help="Generate the signing key with keytool.")(keygen_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
