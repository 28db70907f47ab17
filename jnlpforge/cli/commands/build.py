"""``jnlpforge build`` — run one complete build pass.

Loads the project file, stages and (optionally) signs the jars, writes the
descriptors, copies the extras, cleans the output directory and prints a
summary of what changed.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from jnlpforge.cli.console import configure_logging, console, render_report
from jnlpforge.config import ForgeSettings
from jnlpforge.core.errors import BuildError
from jnlpforge.core.orchestrator import BuildOrchestrator
from jnlpforge.project import load_project


def build_cmd(
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
    tsa: bool = typer.Option(
        None,
        "--tsa/--no-tsa",
        help="Force timestamped signing on or off. Default: on iff a TSA URL is set.",
    ),
) -> None:
    """Build the webstart distribution into the output directory.

    Only jars newer than their staged copy are copied, re-manifested and
    signed. Descriptors and extras are rewritten on every run, and anything
    else in the output directory is deleted.
    """
    settings = ForgeSettings()
    configure_logging(settings.log_level)

    try:
        config = load_project(
            project or settings.project_file,
            output=output,
            default_output=settings.default_output,
        )
        if tsa is not None:
            config = config.model_copy(update={"use_tsa": tsa})
        orchestrator = BuildOrchestrator(config, settings=settings)
        orchestrator.build()
    except (BuildError, ValidationError) as exc:
        console.print(f"[bold red]Build failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    report = orchestrator.last_report
    if report is not None:
        console.print()
        console.print(render_report(report))
        console.print()
