"""
Person name normalization for comparison.
"""

import re
from typing import Optional

_NON_LETTER = re.compile(r"[^a-z\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: Optional[str]) -> str:
    """
    Normalize a person name for comparison.

    - Lowercase
    - Remove everything that is not a-z or whitespace
    - Collapse whitespace and trim

    >>> normalize_name("John O'Brien-Smith  ")
    'john obriensmith'
    """
    if not name:
        return ""

    normalized = _NON_LETTER.sub("", name.lower())
    return _WHITESPACE.sub(" ", normalized).strip()


def name_tokens(name: Optional[str]) -> list[str]:
    """Split a name into normalized tokens (empty list for an empty name)."""
    normalized = normalize_name(name)
    return normalized.split(" ") if normalized else []
