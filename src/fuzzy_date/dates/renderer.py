# src/fuzzy_date/dates/renderer.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as Date
from typing import Optional

from fuzzy_date.dates.tables import (
    ABBREVIATIONS_BY_NAME,
    CIRCA_LABEL,
    DEFAULT_ERA,
    MONTH_NAMES,
    WEEKDAY_NAMES,
)

# The Gregorian calendar repeats exactly every 400 years (146097 days,
# a whole number of weeks).
_GREGORIAN_CYCLE = 400


@dataclass(frozen=True)
class RenderedForms:
    short: str
    long: str
    full: str


def weekday_name(year: int, month: int, day: int) -> str:
    """Weekday of a proleptic Gregorian date; year 0 is allowed."""
    if year < 1:
        year += _GREGORIAN_CYCLE
    return WEEKDAY_NAMES[Date(year, month, day).weekday()]


def render(
    year: Optional[int],
    month: Optional[int],
    day: Optional[int],
    *,
    circa: bool = False,
    era: str = DEFAULT_ERA,
) -> RenderedForms:
    """
    Build the short, long and full display forms for validated fields.

        Y-M-D   3/15/2024          March 15, 2024     Friday, March 15, 2024
        Y-M     3/2024             March, 2024        (long)
        M-D     15-Mar             15 March           (long)
        M       Mar                March              (long)
        Y       2024               2024               2024

    Every form gets "About " in front when ``circa`` is set and the era
    code after a single space.
    """
    prefix = f"{CIRCA_LABEL} " if circa else ""
    suffix = f" {era}"

    def decorate(body: str) -> str:
        return f"{prefix}{body}{suffix}"

    month_name = MONTH_NAMES[month] if month is not None else None

    if year is not None and month is not None and day is not None:
        short = f"{month}/{day}/{year}"
        long = f"{month_name} {day}, {year}"
        full = f"{weekday_name(year, month, day)}, {long}"
    elif year is not None and month is not None:
        short = f"{month}/{year}"
        long = f"{month_name}, {year}"
        full = long
    elif month is not None and day is not None:
        short = f"{day}-{ABBREVIATIONS_BY_NAME[month_name]}"
        long = f"{day} {month_name}"
        full = long
    elif year is not None:
        short = long = full = str(year)
    elif month is not None:
        short = ABBREVIATIONS_BY_NAME[month_name]
        long = full = month_name
    else:
        raise ValueError("Nothing to render: no year, month or day")

    return RenderedForms(short=decorate(short), long=decorate(long), full=decorate(full))
