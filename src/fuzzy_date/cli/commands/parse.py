from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fuzzy_date.cli.utils import resolve_order, write_json
from fuzzy_date.core.exceptions import FuzzyDateError
from fuzzy_date.dates import parse

console = Console()


def parse_command(
    dates: List[str] = typer.Argument(..., help="One or more date strings"),
    euro: Optional[bool] = typer.Option(
        None,
        "--euro/--us",
        help="Read N-N-N as day-month-year (default from config)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of a table",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
):
    """
    Parse date strings and show their short, long and full forms.
    """
    use_european_order = resolve_order(euro)

    records = []
    failed = False
    for text in dates:
        try:
            result = parse(text, use_european_order=use_european_order)
        except FuzzyDateError as exc:
            failed = True
            records.append({"original": text, "error": exc.kind, "message": exc.message})
        else:
            records.append(result.to_dict())

    if as_json:
        write_json(records, out=None, pretty=pretty)
    else:
        table = Table(title="Parsed Dates")
        table.add_column("Input", style="bold")
        table.add_column("Short")
        table.add_column("Long")
        table.add_column("Full")
        table.add_column("Rule", style="dim")

        for record in records:
            if "error" in record:
                table.add_row(escape(record["original"]), f"[red]{escape(record['message'])}[/red]", "", "", "")
            elif record.get("empty"):
                table.add_row(escape(repr(record["original"])), "[dim](no date)[/dim]", "", "", "")
            else:
                table.add_row(
                    escape(record["original"]),
                    escape(record["short"]),
                    escape(record["long"]),
                    escape(record["full"]),
                    record["rule"],
                )

        console.print(table)

    if failed:
        raise typer.Exit(code=1)
