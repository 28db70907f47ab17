"""``jnlpforge keygen`` — generate the signing key with ``keytool``.

Requires both the ``[gen]`` and ``[key]`` tables of the project file.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.panel import Panel

from jnlpforge.cli.console import configure_logging, console
from jnlpforge.config import ForgeSettings
from jnlpforge.core.errors import BuildError
from jnlpforge.core.key_generator import KeyGenerator
from jnlpforge.core.process_runner import SubprocessRunner
from jnlpforge.project import load_project


def keygen_cmd(
    project: Path = typer.Option(
        None,
        "--project",
        "-p",
        help="Project file (jnlpforge.toml or pyproject.toml).",
    ),
) -> None:
    """Generate the signing key described by the project file."""
    settings = ForgeSettings()
    configure_logging(settings.log_level)

    try:
        config = load_project(
            project or settings.project_file,
            default_output=settings.default_output,
            resolve_artifacts=False,
        )
        key_config = KeyGenerator(SubprocessRunner(), keytool=settings.keytool_tool).generate(
            config.gen_config, config.key_config
        )
    except BuildError as exc:
        console.print(f"[bold red]Key generation failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    console.print(
        Panel(
            "\n".join([
                "[bold green]Signing key created.[/bold green]",
                "",
                f"[bold]Keystore:[/bold] {key_config.key_store}",
                f"[bold]Alias:[/bold]    {key_config.alias}",
            ]),
            title="[bold]jnlpforge keygen[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )
