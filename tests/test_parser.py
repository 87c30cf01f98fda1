# tests/test_parser.py

from __future__ import annotations

import pytest

from fuzzy_date import (
    DateParts,
    EmptyDate,
    InvalidDayError,
    InvalidMonthError,
    UnparsableDateError,
    parse,
)
from fuzzy_date.dates.matcher import match_fields


def test_iso_full_date():
    d = parse("2024-03-15")
    assert isinstance(d, DateParts)
    assert (d.year, d.month, d.day) == (2024, 3, 15)
    assert d.month_name == "March"
    assert d.era == "AD"
    assert d.circa is False
    assert d.short == "3/15/2024 AD"
    assert d.long == "March 15, 2024 AD"
    assert d.full == "Friday, March 15, 2024 AD"
    assert d.rule == "iso"
    assert d.precision == "day"


def test_circa_year():
    d = parse("circa 1850")
    assert d.circa is True
    assert d.year == 1850
    assert d.month is None
    assert d.day is None
    assert d.short == "About 1850 AD"
    assert d.long == d.short
    assert d.full == d.short


def test_abt_with_trailing_dot():
    d = parse("Abt. 1700")
    assert d.circa is True
    assert d.fixed == "1700"


def test_day_month_name_year_with_era():
    d = parse("15-Mar-1990 BC")
    assert d.era == "BC"
    assert (d.year, d.month, d.day) == (1990, 3, 15)
    assert d.short == "3/15/1990 BC"
    assert d.fixed == "15-Mar-1990"


def test_month_name_year():
    d = parse("Feb-2000")
    assert (d.year, d.month, d.day) == (2000, 2, None)
    assert d.long == "February, 2000 AD"
    assert d.short == "2/2000 AD"
    assert d.full == d.long


def test_month_name_day_year():
    d = parse("Dec 25, 1776")
    assert (d.year, d.month, d.day) == (1776, 12, 25)
    assert d.rule == "month_name_day_year"
    assert d.full == "Wednesday, December 25, 1776 AD"


def test_full_month_name_is_accepted():
    d = parse("4 July 1776")
    assert (d.year, d.month, d.day) == (1776, 7, 4)
    assert d.full == "Thursday, July 4, 1776 AD"


def test_month_and_day_without_year():
    d = parse("25 December")
    assert (d.year, d.month, d.day) == (None, 12, 25)
    assert d.era == "AD"
    assert d.short == "25-Dec AD"
    assert d.long == "25 December AD"
    assert d.full == d.long
    assert d.precision == "month_day"


def test_circa_and_era_decorate_every_form():
    d = parse("About 3 Jan 44 BCE")
    assert d.circa is True
    assert d.era == "BCE"
    for form in (d.short, d.long, d.full):
        assert form.startswith("About ")
        assert form.endswith(" BCE")


def test_year_is_not_zero_padded_for_display():
    d = parse("100-2-3")
    assert d.year == 100
    assert d.short == "2/3/100 AD"
    assert d.long == "February 3, 100 AD"
    assert d.full.endswith(", February 3, 100 AD")


def test_separators_are_normalized():
    d = parse("  1850 / 06 . 01  ")
    assert d.fixed == "1850-06-01"
    assert (d.year, d.month, d.day) == (1850, 6, 1)


def test_original_is_kept_before_trimming():
    d = parse("  1850  ")
    assert d.original == "  1850  "


def test_non_string_input_is_coerced():
    d = parse(1850)
    assert d.year == 1850
    assert d.original == "1850"


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
def test_blank_input_is_empty_not_error(raw):
    d = parse(raw)
    assert isinstance(d, EmptyDate)
    assert not d
    assert d.to_dict()["empty"] is True


def test_european_order_flag():
    d = parse("14-05-2020", use_european_order=True)
    assert (d.year, d.month, d.day) == (2020, 5, 14)
    assert d.rule == "day_month_year"

    with pytest.raises(InvalidMonthError) as exc_info:
        parse("14-05-2020", use_european_order=False)
    assert exc_info.value.bound == "upper"
    assert exc_info.value.month == 14


def test_european_order_does_not_affect_other_shapes():
    assert parse("1850-06-01", use_european_order=True).month == 6
    assert parse("6-1850", use_european_order=True).month == 6


def test_invalid_day_in_february():
    with pytest.raises(InvalidDayError) as exc_info:
        parse("30-Feb-2001")
    assert exc_info.value.original == "30-Feb-2001"
    assert exc_info.value.kind == "invalid_day"


def test_leap_day():
    assert parse("29 Feb 2000").day == 29
    assert parse("2024-2-29").day == 29
    with pytest.raises(InvalidDayError):
        parse("29 Feb 1900")
    with pytest.raises(InvalidDayError):
        parse("2023-02-29")


def test_leap_day_without_year_is_accepted():
    d = parse("29 Feb")
    assert (d.month, d.day) == (2, 29)


def test_month_zero_is_lower_bound_error():
    with pytest.raises(InvalidMonthError) as exc_info:
        parse("0-1850")
    assert exc_info.value.bound == "lower"


def test_month_thirteen_is_rejected():
    with pytest.raises(InvalidMonthError):
        parse("13-1850")


def test_day_zero_is_rejected():
    with pytest.raises(InvalidDayError):
        parse("1850-06-00")


def test_unparsable_input():
    with pytest.raises(UnparsableDateError) as exc_info:
        parse("Unknown")
    assert exc_info.value.fixed == "Unknown"
    assert exc_info.value.original == "Unknown"


def test_range_input_is_rejected_with_hint():
    with pytest.raises(UnparsableDateError) as exc_info:
        parse("Between 1850 and 1860")
    assert "ranges are not supported" in str(exc_info.value)


def test_marker_only_input_is_unparsable():
    with pytest.raises(UnparsableDateError):
        parse("circa")


def test_short_form_round_trips():
    for text in ("2024-03-15", "1066-10-14", "999-12-31", "1752-9-2"):
        first = parse(text)
        again = parse(first.short)
        assert (again.year, again.month, again.day) == (first.year, first.month, first.day)


def test_fixed_is_idempotent_through_matcher():
    for text in ("Abt 15 March 1990 BC", "Feb 2000", "2024/03/15", "25 Dec", "circa 1850"):
        d = parse(text)
        again = match_fields(d.fixed)
        assert (again.year, again.month, again.day) == (d.year, d.month, d.day)


def test_results_are_independent():
    a = parse("circa 1850")
    b = parse("1850")
    assert a.circa is True
    assert b.circa is False
    with pytest.raises(Exception):
        a.year = 1900  # frozen


def test_to_dict():
    data = parse("Feb-2000").to_dict()
    assert data["month_name"] == "February"
    assert data["precision"] == "month"
    assert data["rule"] == "month_name"
    assert data["original"] == "Feb-2000"


def test_bare_month_name_is_month_only():
    d = parse("Feb")
    assert (d.year, d.month, d.day) == (None, 2, None)
    assert d.precision == "month_only"
    assert d.short == "Feb AD"
    assert d.long == d.full == "February AD"


def test_brackets_are_separators():
    d = parse("[/about] 1850")
    assert d.circa is True
    assert d.year == 1850
