"""
CLI Interface
=============
Command-line interface for the puzzle solvers.

Usage:
    python -m trebuchet solve --day <n> --input <path> [options]
    python -m trebuchet days
"""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .engine import SolverConfig, SolverEngine
from .errors import PuzzleError
from .registry import PUZZLES

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="trebuchet")
def cli():
    """Trebuchet: plaintext puzzle solvers."""
    pass


@cli.command()
@click.option(
    "--day", "-d",
    required=True,
    type=int,
    help="Which day's puzzle are you solving?",
)
@click.option(
    "--input", "-i", "input_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="Plaintext file containing your unique puzzle input",
)
@click.option(
    "--parallel", "-j",
    default=1,
    type=click.IntRange(min=1),
    help="Number of worker threads (1 = sequential)",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
@click.option(
    "--log-file",
    default=None,
    help="Path to log file",
)
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Output only JSON result to stdout (for programmatic use)",
)
def solve(
    day: int,
    input_path: str,
    parallel: int,
    log_level: str,
    log_file: str,
    json_output: bool,
):
    """Solve both parts of one day's puzzle."""

    if json_output:
        # Suppress console output for JSON mode
        log_level = "ERROR"

    config = SolverConfig(
        log_level=log_level,
        log_file=log_file,
        workers=parallel,
    )

    try:
        engine = SolverEngine(config)
        result = engine.solve(day, input_path)
    except (FileNotFoundError, PuzzleError) as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False)
        sys.exit(1)

    if json_output:
        # Output clean JSON to stdout
        print(json.dumps(result.model_dump(), indent=2))
        return

    console.print()
    console.print(
        Panel.fit(
            f"[bold cyan]Day {result.day}[/]\n"
            f"[dim]{result.title} · {result.source}[/]",
            border_style="cyan",
        )
    )
    console.print(f"part one: {result.part_one}", highlight=False)
    console.print(f"part two: {result.part_two}", highlight=False)
    mode = f"{result.workers} workers" if result.parallel else "sequential"
    console.print(
        f"[dim]Lines: {result.line_count} | {mode} | "
        f"{result.elapsed_seconds:.4f}s[/]"
    )


@cli.command()
def days():
    """List the days with a registered solver."""

    table = Table(title="Puzzles", border_style="cyan")
    table.add_column("Day", justify="right", style="bold")
    table.add_column("Title")
    table.add_column("Parallel", justify="center")

    for day, puzzle in sorted(PUZZLES.items()):
        table.add_row(
            str(day),
            puzzle.title,
            "[green]✓[/]" if puzzle.supports_parallel else "[dim]-[/]",
        )

    console.print()
    console.print(table)
    console.print()


if __name__ == "__main__":
    cli()
