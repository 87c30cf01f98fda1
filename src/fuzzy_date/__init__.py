"""
fuzzy_date: parse loosely formatted historical dates.

    >>> from fuzzy_date import parse
    >>> parse("circa 1850").short
    'About 1850 AD'
"""

from fuzzy_date.core.exceptions import (
    FuzzyDateError,
    InvalidDayError,
    InvalidMonthError,
    UnparsableDateError,
)
from fuzzy_date.dates import DateParts, EmptyDate, ParseResult, parse

__version__ = "0.1.0"

__all__ = [
    "DateParts",
    "EmptyDate",
    "FuzzyDateError",
    "InvalidDayError",
    "InvalidMonthError",
    "ParseResult",
    "UnparsableDateError",
    "parse",
]
