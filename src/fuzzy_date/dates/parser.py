# src/fuzzy_date/dates/parser.py

"""
Public entry point: parse one loosely formatted date.

    parse("2024-03-15")      -> DateParts(year=2024, month=3, day=15, ...)
    parse("Abt. 15 Mar 1990 BC")
    parse("14-05-2020", use_european_order=True)
    parse("   ")             -> EmptyDate(original="   ")

Stages run in a fixed order: sanitize, strip modifiers, match a format
rule, validate, render. Nothing is cached between calls.
"""

from __future__ import annotations

from typing import Any, Union

from fuzzy_date.core.exceptions import FuzzyDateError, UnparsableDateError
from fuzzy_date.dates.matcher import match_fields
from fuzzy_date.dates.models import DateParts, EmptyDate
from fuzzy_date.dates.modifiers import extract_modifiers, looks_like_range
from fuzzy_date.dates.renderer import render
from fuzzy_date.dates.sanitizer import sanitize
from fuzzy_date.dates.tables import MONTH_NAMES
from fuzzy_date.dates.validator import validate_fields
from fuzzy_date.logging import get_logger

log = get_logger(__name__)

ParseResult = Union[DateParts, EmptyDate]


def _original_text(raw: Any) -> str:
    if raw is None:
        return ""
    return raw if isinstance(raw, str) else str(raw)


def parse(text: Any, use_european_order: bool = False) -> ParseResult:
    """
    Parse a single date (not a range) into a ``DateParts``.

    Args:
        text: Anything coercible to str; surrounding whitespace is ignored.
        use_european_order: Read "1-2-1900" as day-month-year instead of
            month-day-year. No other shape is affected.

    Returns:
        ``DateParts`` for a parsed date, ``EmptyDate`` for blank input.

    Raises:
        UnparsableDateError: no format rule matched.
        InvalidMonthError: month outside 1..12.
        InvalidDayError: day not in the month (Feb 29 needs a leap year).
    """
    original = _original_text(text)
    cleaned = sanitize(text)

    if cleaned is None:
        log.debug("Empty date input: %r", original)
        return EmptyDate(original=original)

    modifiers = extract_modifiers(cleaned)

    try:
        matched = match_fields(modifiers.fixed, use_european_order=use_european_order)
        validate_fields(matched.year, matched.month, matched.day)
    except UnparsableDateError as exc:
        exc.original = original
        if looks_like_range(cleaned):
            exc.message = f"{exc.message} Date ranges are not supported."
            exc.args = (exc.message,)
        log.debug("Unparsable date %r: %s", original, exc.message)
        raise
    except FuzzyDateError as exc:
        exc.original = original
        log.debug("Invalid date %r: %s", original, exc.message)
        raise

    forms = render(
        matched.year,
        matched.month,
        matched.day,
        circa=modifiers.circa,
        era=modifiers.era,
    )

    parts = DateParts(
        original=original,
        fixed=modifiers.fixed,
        circa=modifiers.circa,
        era=modifiers.era,
        year=matched.year,
        month=matched.month,
        day=matched.day,
        month_name=MONTH_NAMES.get(matched.month) if matched.month is not None else None,
        short=forms.short,
        long=forms.long,
        full=forms.full,
        rule=matched.rule,
    )

    log.debug(
        "Parsed %r via %s -> year=%s month=%s day=%s",
        original, matched.rule, parts.year, parts.month, parts.day,
    )
    return parts
