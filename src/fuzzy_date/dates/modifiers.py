# src/fuzzy_date/dates/modifiers.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from fuzzy_date.dates.tables import (
    CIRCA_WORDS,
    DEFAULT_ERA,
    ERA_WORDS,
    MIDDLE_RANGE_WORDS,
    MONTH_ABBREVIATIONS,
    RANGE_WORDS,
)

# Any run of non-alphanumeric characters separates tokens.
DATE_SEPARATOR = re.compile(r"[^A-Za-z0-9]+")
CANONICAL_SEPARATOR = "-"


@dataclass(frozen=True)
class Modifiers:
    """Result of stripping the circa/era markers off a sanitized date."""
    circa: bool
    era: str
    fixed: str


def tokenize(text: str) -> List[str]:
    return [t for t in DATE_SEPARATOR.split(text) if t]


def _find_word(token: str, vocabulary) -> Optional[str]:
    """Return the first vocabulary item contained in ``token`` (case-insensitive)."""
    lowered = token.lower()
    for word in vocabulary:
        if word.lower() in lowered:
            return word
    return None


def _is_month_token(token: str) -> bool:
    prefix = token[:3].lower()
    return any(prefix == abbr.lower() for abbr in MONTH_ABBREVIATIONS)


def extract_modifiers(text: str) -> Modifiers:
    """
    Strip a leading circa marker and a trailing era marker from ``text``.

    Detection is by substring: "Abt." or "circa," on the first token and
    "BC" or "bce" on the last all count. The remaining tokens are joined
    with "-" to form the canonical ``fixed`` sequence.
    """
    tokens = tokenize(text)
    circa = False
    era = DEFAULT_ERA

    if tokens and _find_word(tokens[0], CIRCA_WORDS):
        circa = True
        tokens.pop(0)

    # "December" contains "ce"; month tokens are never era markers.
    if tokens and not _is_month_token(tokens[-1]):
        found = _find_word(tokens[-1], ERA_WORDS)
        if found:
            era = found.upper().strip()
            tokens.pop()

    return Modifiers(circa=circa, era=era, fixed=CANONICAL_SEPARATOR.join(tokens))


def looks_like_range(text: str) -> bool:
    """
    True when ``text`` uses the reserved range vocabulary
    ("Between 1850 and 1860", "From 1900 to 1910").
    """
    tokens = [t.lower() for t in tokenize(text)]
    if not tokens:
        return False

    range_words = {w.lower().rstrip(".") for w in RANGE_WORDS}
    middle_words = {w.lower() for w in MIDDLE_RANGE_WORDS}

    if tokens[0] in range_words:
        return True
    return any(t in middle_words for t in tokens[1:-1])
