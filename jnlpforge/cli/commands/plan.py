"""``jnlpforge plan`` — show which jars the next build would copy."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from jnlpforge.cli.console import console
from jnlpforge.config import ForgeSettings
from jnlpforge.core.asset_stager import AssetStager
from jnlpforge.core.errors import BuildError
from jnlpforge.project import load_project


def plan_cmd(
    project: Path = typer.Option(
        None,
        "--project",
        "-p",
        help="Project file (jnlpforge.toml or pyproject.toml).",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory, overriding the project file.",
    ),
) -> None:
    """List every jar with its target and whether it is stale. Copies nothing."""
    settings = ForgeSettings()
    try:
        config = load_project(
            project or settings.project_file,
            output=output,
            default_output=settings.default_output,
        )
        stager = AssetStager(config.output)
        rows = [(pair, stager.is_stale(pair)) for pair in stager.plan(config.artifacts)]
    except BuildError as exc:
        console.print(f"[bold red]Plan failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title=f"Staging plan for {escape(str(config.output))}")
    table.add_column("Jar", style="cyan")
    table.add_column("Source")
    table.add_column("Status", justify="center")
    for pair, stale in rows:
        status = "[yellow]copy[/yellow]" if stale else "[green]up to date[/green]"
        table.add_row(escape(pair.target.name), escape(str(pair.source)), status)

    console.print(table)
    stale_count = sum(1 for _, stale in rows if stale)
    console.print(f"[bold]{stale_count}[/bold] of {len(rows)} jar(s) would be copied.")
