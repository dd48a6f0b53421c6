"""Typer CLI entry point for G-Dep Tree."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from g_dep_tree.config import ReportConfig
from g_dep_tree.exceptions import GDepError
from g_dep_tree.models import DependencyReport
from g_dep_tree.tree import load_report, load_report_file
from g_dep_tree.visualize import build_rich_tree, summarize_configuration

app = typer.Typer(add_completion=False, help="Inspect `gradle dependencies` reports.")
console = Console()

STDIN_NAME = "-"


def _configure(verbose: bool) -> ReportConfig:
    config = ReportConfig.from_env()
    config.validate()
    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)
    return config


def _read(report: Path, config: ReportConfig) -> DependencyReport:
    if str(report) == STDIN_NAME:
        return load_report(sys.stdin)
    return load_report_file(report, encoding=config.encoding)


@app.command()
def show(
    report: Annotated[Path, typer.Argument(help="Saved `gradle dependencies` output, or '-' for stdin.")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the tree as JSON.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Parse a report and print its dependency tree."""
    try:
        config = _configure(verbose)
        parsed = _read(report, config)
        if as_json:
            typer.echo(parsed.model_dump_json(indent=2))
            return
        console.print(build_rich_tree(parsed))
    except (GDepError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", emoji=False)
        raise typer.Exit(code=1) from None


@app.command()
def configurations(
    report: Annotated[Path, typer.Argument(help="Saved `gradle dependencies` output, or '-' for stdin.")],
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """List the configurations of a report with dependency counts."""
    try:
        config = _configure(verbose)
        parsed = _read(report, config)
    except (GDepError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", emoji=False)
        raise typer.Exit(code=1) from None

    table = Table(title="Configurations")
    table.add_column("Configuration")
    table.add_column("Direct", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Omitted", justify="right")
    table.add_column("Conflicts", justify="right")

    if not parsed.configurations:
        console.print(table)
        console.print("[dim]No configurations found.[/dim]")
        return

    for configuration in parsed.configurations:
        counts = summarize_configuration(configuration)
        table.add_row(
            Text(configuration.label),
            str(counts["direct"]),
            str(counts["total"]),
            str(counts["omitted"]),
            str(counts["conflicts"]),
        )
    console.print(table)

    if parsed.unplaced:
        console.print(f"[dim]{len(parsed.unplaced)} line(s) could not be placed in the tree.[/dim]")


def main() -> None:
    """Console-script entry point."""
    app()
