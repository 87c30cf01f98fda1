
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from fuzzy_date.cli.utils import resolve_order, run_batch

console = Console()


def stats_command(
    source: Path = typer.Argument(..., exists=True, readable=True, help="File with one date per line"),
    euro: Optional[bool] = typer.Option(
        None,
        "--euro/--us",
        help="Read N-N-N as day-month-year (default from config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a file of dates.
    """
    ctx, results = run_batch(source, use_european_order=resolve_order(euro), verbose=verbose)
    stats = ctx.stats

    table = Table(title="Date Statistics")
    table.add_column("Outcome", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Lines", str(len(results)))
    table.add_row("Parsed", str(stats["parsed"]))
    table.add_row("Empty", str(stats["empty"]))
    table.add_row("Failed", str(stats["failed"]))

    console.print(table)

    for title, key in (
        ("By Precision", "by_precision"),
        ("By Rule", "by_rule"),
        ("By Error", "by_error"),
    ):
        if not stats[key]:
            continue
        breakdown = Table(title=title)
        breakdown.add_column("Name", style="bold")
        breakdown.add_column("Count", justify="right")
        for name, count in stats[key].most_common():
            breakdown.add_row(name, str(count))
        console.print(breakdown)
