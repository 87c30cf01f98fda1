"""
Core package: error taxonomy and batch orchestration.
"""

from fuzzy_date.core.exceptions import (
    FuzzyDateError,
    InvalidDayError,
    InvalidMonthError,
    UnparsableDateError,
)

__all__ = [
    "FuzzyDateError",
    "InvalidDayError",
    "InvalidMonthError",
    "UnparsableDateError",
]
