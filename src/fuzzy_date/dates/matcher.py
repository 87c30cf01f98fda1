# src/fuzzy_date/dates/matcher.py

"""
Ordered format cascade for canonicalized ("-"-joined) date strings.

Several of the supported shapes overlap textually, so the rules are tried
strictly in order and the first match wins:

    1. year                 YYYY            (1-4 digits)
    2. iso                  YYYY[-MM[-DD]]  (leading 3-4 digit year)
    3. day_month_year       DD-MM-YYYY      (European order only)
    4. month_day_year       MM-DD-YYYY
    5. month_year           MM-YYYY
    6. day_month_name       DD-Mon[-YYYY]
    7. month_name_day_year  Mon-DD-YYYY
    8. month_name           Mon[-YYYY]

Month names match on their three-letter abbreviation as a prefix, so
"Mar", "MARCH" and "marzipan" all resolve to March.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from fuzzy_date.core.exceptions import UnparsableDateError
from fuzzy_date.dates.tables import MONTH_ABBREVIATIONS, MONTH_NUMBERS

Fields = Tuple[Optional[int], Optional[int], Optional[int]]

_MONTH = "(" + "|".join(MONTH_ABBREVIATIONS) + ")[^-]*"


@dataclass(frozen=True)
class MatchedFields:
    """Raw (year, month, day) candidates plus the rule that produced them."""
    year: Optional[int]
    month: Optional[int]
    day: Optional[int]
    rule: str


@dataclass(frozen=True)
class FormatRule:
    name: str
    pattern: re.Pattern[str]
    extract: Callable[[re.Match[str]], Fields]
    european_only: bool = False


def _int(value: Optional[str]) -> Optional[int]:
    return int(value) if value else None


def resolve_month(token: str) -> int:
    """Map a month token (any case, abbreviation prefix) to its number."""
    abbreviation = token[:3].capitalize()
    full_name = MONTH_ABBREVIATIONS[abbreviation]
    return MONTH_NUMBERS[full_name]


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


FORMAT_RULES: Tuple[FormatRule, ...] = (
    FormatRule(
        "year",
        _compile(r"^(\d{1,4})$"),
        lambda m: (int(m.group(1)), None, None),
    ),
    FormatRule(
        "iso",
        _compile(r"^(\d{3,4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?$"),
        lambda m: (int(m.group(1)), _int(m.group(2)), _int(m.group(3))),
    ),
    FormatRule(
        "day_month_year",
        _compile(r"^(\d{1,2})-(\d{1,2})-(\d{1,4})$"),
        lambda m: (int(m.group(3)), int(m.group(2)), int(m.group(1))),
        european_only=True,
    ),
    FormatRule(
        "month_day_year",
        _compile(r"^(\d{1,2})-(\d{1,2})-(\d{1,4})$"),
        lambda m: (int(m.group(3)), int(m.group(1)), int(m.group(2))),
    ),
    FormatRule(
        "month_year",
        _compile(r"^(\d{1,2})-(\d{1,4})$"),
        lambda m: (int(m.group(2)), int(m.group(1)), None),
    ),
    FormatRule(
        "day_month_name",
        _compile(r"^(\d{1,2})-" + _MONTH + r"(?:-(\d{1,4}))?$"),
        lambda m: (_int(m.group(3)), resolve_month(m.group(2)), int(m.group(1))),
    ),
    FormatRule(
        "month_name_day_year",
        _compile(r"^" + _MONTH + r"-(\d{1,2})-(\d{1,4})$"),
        lambda m: (int(m.group(3)), resolve_month(m.group(1)), int(m.group(2))),
    ),
    FormatRule(
        "month_name",
        _compile(r"^" + _MONTH + r"(?:-(\d{1,4}))?$"),
        lambda m: (_int(m.group(2)), resolve_month(m.group(1)), None),
    ),
)


def match_fields(fixed: str, use_european_order: bool = False) -> MatchedFields:
    """
    Classify ``fixed`` with the first matching rule of ``FORMAT_RULES``.

    Raises:
        UnparsableDateError: if no rule matches.
    """
    for rule in FORMAT_RULES:
        if rule.european_only and not use_european_order:
            continue
        m = rule.pattern.match(fixed)
        if m is None:
            continue
        year, month, day = rule.extract(m)
        return MatchedFields(year=year, month=month, day=day, rule=rule.name)

    raise UnparsableDateError(f"Cannot parse date: {fixed!r}", fixed=fixed)
