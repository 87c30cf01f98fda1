
"""
CLI command modules for fuzzy_date.

Each command module defines a single Typer-compatible command function.
"""

from fuzzy_date.cli.commands.batch import batch_command
from fuzzy_date.cli.commands.parse import parse_command
from fuzzy_date.cli.commands.stats import stats_command

__all__ = [
    "batch_command",
    "parse_command",
    "stats_command",
]
