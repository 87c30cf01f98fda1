# src/fuzzy_date/dates/validator.py

from __future__ import annotations

from typing import Optional

from fuzzy_date.core.exceptions import InvalidDayError, InvalidMonthError
from fuzzy_date.dates.tables import DAYS_IN_MONTH, MONTH_NAMES


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap-year rule (year 0 is a leap year)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def validate_fields(
    year: Optional[int],
    month: Optional[int],
    day: Optional[int],
) -> None:
    """
    Check that the extracted fields denote a real calendar date.

    February 29 needs a leap year when a year is known. Without a year it
    is accepted, since the day exists in some year.

    Raises:
        InvalidMonthError: month outside 1..12.
        InvalidDayError: day below 1 or past the end of the month.
    """
    if month is not None:
        if month > 12:
            raise InvalidMonthError(month, "upper")
        if month < 1:
            raise InvalidMonthError(month, "lower")

    if day is None:
        return

    if day < 1:
        raise InvalidDayError(
            f"Day cannot be less than 1 (got {day}).",
            day=day, month=month, year=year,
        )

    if month is None:
        return

    limit = DAYS_IN_MONTH[month]
    if day <= limit:
        return

    if month == 2 and day == 29 and (year is None or is_leap_year(year)):
        return

    where = MONTH_NAMES[month] if year is None else f"{MONTH_NAMES[month]} {year}"
    raise InvalidDayError(
        f"Too many days in this month: {where} has no day {day}.",
        day=day, month=month, year=year,
    )
