# src/fuzzy_date/dates/sanitizer.py

from __future__ import annotations

from typing import Any, Optional


def sanitize(raw: Any) -> Optional[str]:
    """
    Coerce ``raw`` to text and trim surrounding whitespace.

    Returns None when nothing is left; callers treat that as "no date
    present", not as a failure.
    """
    if raw is None:
        return None

    text = str(raw).strip()
    return text or None
