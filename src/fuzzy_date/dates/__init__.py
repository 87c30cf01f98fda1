"""
Single-date parsing: tables, stages and the public ``parse`` entry point.
"""

from fuzzy_date.dates.models import DateParts, EmptyDate
from fuzzy_date.dates.parser import ParseResult, parse

__all__ = [
    "DateParts",
    "EmptyDate",
    "ParseResult",
    "parse",
]
