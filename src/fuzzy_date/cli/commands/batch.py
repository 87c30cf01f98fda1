from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from fuzzy_date.cli.utils import resolve_order, run_batch, write_json

console = Console()


def batch_command(
    source: Path = typer.Argument(..., exists=True, readable=True, help="File with one date per line"),
    euro: Optional[bool] = typer.Option(
        None,
        "--euro/--us",
        help="Read N-N-N as day-month-year (default from config)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Parse a file of dates (one per line) and export a JSON report.
    """
    ctx, results = run_batch(source, use_european_order=resolve_order(euro), verbose=verbose)

    data = {
        "counts": {
            "lines": len(results),
            "parsed": ctx.stats["parsed"],
            "empty": ctx.stats["empty"],
            "failed": ctx.stats["failed"],
        },
        "results": [r.to_dict() for r in results],
        "errors": ctx.errors,
    }

    if verbose:
        console.log("Exporting JSON")

    write_json(data, out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")
