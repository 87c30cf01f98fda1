# src/fuzzy_date/dates/models.py

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class DateParts:
    """
    A parsed single date and its rendered forms.

    Attributes:
        original: Raw input as given, before trimming.
        fixed: Canonical "-"-joined tokens left after modifier stripping.
        circa: True when a circa marker ("About", "Circa", "Abt") led the input.
        era: AD, BC, CE or BCE; AD when absent. Display only.
        year, month, day: Validated fields; any may be None.
        month_name: Full month name for ``month``.
        short, long, full: Rendered forms, e.g. "3/15/2024 AD",
            "March 15, 2024 AD", "Friday, March 15, 2024 AD".
        rule: Name of the format rule that matched ``fixed``.
    """
    original: str
    fixed: str
    circa: bool
    era: str
    year: Optional[int]
    month: Optional[int]
    day: Optional[int]
    month_name: Optional[str]
    short: str
    long: str
    full: str
    rule: str

    @property
    def precision(self) -> str:
        """
        Which fields are set: "day" (Y-M-D), "month" (Y-M), "month_day" (M-D),
        "year" (Y), or "month_only" for a bare month name such as "Feb".
        """
        if self.year is not None and self.month is not None and self.day is not None:
            return "day"
        if self.year is not None and self.month is not None:
            return "month"
        if self.month is not None and self.day is not None:
            return "month_day"
        if self.year is not None:
            return "year"
        return "month_only"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["precision"] = self.precision
        return data


@dataclass(frozen=True)
class EmptyDate:
    """Outcome for input that is blank after trimming: no date present."""
    original: str

    def __bool__(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"original": self.original, "empty": True}
