# tests/test_renderer.py

from __future__ import annotations

import pytest

from fuzzy_date.dates.renderer import render, weekday_name


def test_year_month_day() -> None:
    r = render(2024, 3, 15)
    assert r.short == "3/15/2024 AD"
    assert r.long == "March 15, 2024 AD"
    assert r.full == "Friday, March 15, 2024 AD"


def test_year_month() -> None:
    r = render(1850, 6, None, circa=True)
    assert r.short == "About 6/1850 AD"
    assert r.long == "About June, 1850 AD"
    assert r.full == r.long


def test_month_day_uses_abbreviation_from_month_number() -> None:
    r = render(None, 9, 2, era="CE")
    assert r.short == "2-Sep CE"
    assert r.long == "2 September CE"
    assert r.full == r.long


def test_year_only() -> None:
    r = render(44, None, None, era="BC")
    assert r.short == r.long == r.full == "44 BC"


def test_month_only() -> None:
    r = render(None, 5, None)
    assert r.short == "May AD"
    assert r.long == r.full == "May AD"


def test_nothing_to_render() -> None:
    with pytest.raises(ValueError):
        render(None, None, None)


@pytest.mark.parametrize(
    "ymd, name",
    [
        ((2024, 3, 15), "Friday"),
        ((1776, 7, 4), "Thursday"),
        ((2000, 1, 1), "Saturday"),
        ((1, 1, 1), "Monday"),
        ((0, 1, 1), "Saturday"),
        ((0, 2, 29), "Tuesday"),
    ],
)
def test_weekday_is_proleptic_gregorian(ymd, name) -> None:
    assert weekday_name(*ymd) == name
