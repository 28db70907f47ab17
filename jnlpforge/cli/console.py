"""Shared Rich console, logging setup and report rendering for the CLI."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from jnlpforge.models.reports import BuildReport

console = Console()


def configure_logging(level: str) -> None:
    """Route jnlpforge's log records through a RichHandler at *level*."""
    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("jnlpforge")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(level.upper())


def _names(paths: list[Path]) -> str:
    return ", ".join(escape(p.name) for p in paths) or "[dim]-[/dim]"


def render_report(report: BuildReport) -> Panel:
    """Render a BuildReport as a Rich Panel containing a Table."""
    table = Table(show_header=True, header_style="bold cyan", expand=True)
    table.add_column("Step", min_width=14)
    table.add_column("Count", width=7, justify="right")
    table.add_column("Entries")

    table.add_row("Jars", str(len(report.staged)), _names(report.staged))
    table.add_row("Copied", str(len(report.fresh)), _names(report.fresh))
    table.add_row(
        "Manifests", str(len(report.manifests_extended)), _names(report.manifests_extended)
    )
    signed = _names(report.signed)
    if report.signed and report.timestamped:
        signed += " [green](timestamped)[/green]"
    table.add_row("Signed", str(len(report.signed)), signed)
    table.add_row("Descriptors", str(len(report.descriptors)), _names(report.descriptors))
    table.add_row("Extras", str(len(report.extras)), _names(report.extras))
    table.add_row("Deleted", str(len(report.deleted)), _names(report.deleted))

    subtitle = (
        "[dim]Up to date: no jar copied or signed.[/dim]"
        if report.is_noop
        else f"[bold green]{len(report.fresh)} jar(s) refreshed.[/bold green]"
    )
    return Panel(
        table,
        title=f"[bold]Webstart build[/bold] [dim]{escape(str(report.output))}[/dim]",
        subtitle=subtitle,
        border_style="green",
        padding=(1, 2),
    )
