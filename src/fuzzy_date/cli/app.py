
from __future__ import annotations

import typer

from fuzzy_date.cli.commands.batch import batch_command
from fuzzy_date.cli.commands.parse import parse_command
from fuzzy_date.cli.commands.stats import stats_command

app = typer.Typer(
    name="fuzzy-date",
    help="Parse and render loosely formatted historical dates",
    add_completion=False,
)

app.command("parse")(parse_command)
app.command("batch")(batch_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
