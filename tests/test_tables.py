# tests/test_tables.py

from __future__ import annotations

import pytest

from fuzzy_date.dates.tables import (
    ABBREVIATIONS_BY_NAME,
    CIRCA_WORDS,
    DAYS_IN_MONTH,
    ERA_WORDS,
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    MONTH_NUMBERS,
)


def test_month_tables_agree() -> None:
    assert len(MONTH_NAMES) == 12
    for number, name in MONTH_NAMES.items():
        assert MONTH_NUMBERS[name] == number
        assert MONTH_ABBREVIATIONS[ABBREVIATIONS_BY_NAME[name]] == name
        assert name.startswith(ABBREVIATIONS_BY_NAME[name])


def test_days_in_month() -> None:
    assert sum(DAYS_IN_MONTH.values()) == 365
    assert DAYS_IN_MONTH[2] == 28


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        MONTH_NAMES[13] = "Undecimber"  # type: ignore[index]
    with pytest.raises(TypeError):
        DAYS_IN_MONTH[2] = 29  # type: ignore[index]


def test_vocabulary() -> None:
    assert set(ERA_WORDS) == {"AD", "BC", "CE", "BCE"}
    assert {"Circa", "About", "Abt", "Abt.", "~"} == set(CIRCA_WORDS)


def test_only_december_collides_with_era_vocabulary() -> None:
    # The modifier extractor guards month tokens for this reason.
    collisions = [
        name for name in MONTH_NAMES.values()
        if any(era.lower() in name.lower() for era in ERA_WORDS)
    ]
    assert collisions == ["December"]
