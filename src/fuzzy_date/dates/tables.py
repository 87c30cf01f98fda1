# src/fuzzy_date/dates/tables.py

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple


# ---------------------------------------------------------------------------
# Month tables
# ---------------------------------------------------------------------------

MONTH_NAMES: Mapping[int, str] = MappingProxyType({
    1: "January",
    2: "February",
    3: "March",
    4: "April",
    5: "May",
    6: "June",
    7: "July",
    8: "August",
    9: "September",
    10: "October",
    11: "November",
    12: "December",
})

MONTH_ABBREVIATIONS: Mapping[str, str] = MappingProxyType({
    "Jan": "January",
    "Feb": "February",
    "Mar": "March",
    "Apr": "April",
    "May": "May",
    "Jun": "June",
    "Jul": "July",
    "Aug": "August",
    "Sep": "September",
    "Oct": "October",
    "Nov": "November",
    "Dec": "December",
})

MONTH_NUMBERS: Mapping[str, int] = MappingProxyType(
    {name: number for number, name in MONTH_NAMES.items()}
)

ABBREVIATIONS_BY_NAME: Mapping[str, str] = MappingProxyType(
    {name: abbr for abbr, name in MONTH_ABBREVIATIONS.items()}
)

# February is 28 here; the validator handles the leap-year exception.
DAYS_IN_MONTH: Mapping[int, int] = MappingProxyType({
    1: 31,
    2: 28,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
})


# ---------------------------------------------------------------------------
# Modifier vocabulary
# ---------------------------------------------------------------------------

CIRCA_WORDS: Tuple[str, ...] = ("Circa", "About", "Abt", "Abt.", "~")

# Longest first so "BCE" wins over "BC" and "CE".
ERA_WORDS: Tuple[str, ...] = ("BCE", "AD", "BC", "CE")

DEFAULT_ERA = "AD"
CIRCA_LABEL = "About"

# Reserved for a range grammar; single-date parsing only uses them to
# explain a failure.
RANGE_WORDS: Tuple[str, ...] = ("Between", "Bet", "Bet.", "From")
MIDDLE_RANGE_WORDS: Tuple[str, ...] = ("To", "And")

# Monday first, matching date.weekday(); fixed English, independent of locale.
WEEKDAY_NAMES: Tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
