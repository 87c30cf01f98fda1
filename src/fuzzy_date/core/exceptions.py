from __future__ import annotations

from typing import Optional


class FuzzyDateError(ValueError):
    """Base exception for date parsing failures."""

    kind = "error"

    def __init__(self, message: str, *, original: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.original = original


class UnparsableDateError(FuzzyDateError):
    """Raised when no format rule matches the canonicalized input."""

    kind = "unparsable"

    def __init__(self, message: str, *, fixed: str = "", original: Optional[str] = None):
        super().__init__(message, original=original)
        self.fixed = fixed


class InvalidMonthError(FuzzyDateError):
    """Raised when the month falls outside 1..12."""

    kind = "invalid_month"

    def __init__(self, month: int, bound: str, *, original: Optional[str] = None):
        if bound == "upper":
            message = f"Month cannot be greater than 12 (got {month})."
        else:
            message = f"Month cannot be less than 1 (got {month})."
        super().__init__(message, original=original)
        self.month = month
        self.bound = bound


class InvalidDayError(FuzzyDateError):
    """Raised when the day does not exist in the resolved month/year."""

    kind = "invalid_day"

    def __init__(
        self,
        message: str,
        *,
        day: int,
        month: Optional[int] = None,
        year: Optional[int] = None,
        original: Optional[str] = None,
    ):
        super().__init__(message, original=original)
        self.day = day
        self.month = month
        self.year = year
