"""Substring matching used to map free-form settings onto a closed set of values."""

from __future__ import annotations

from typing import Iterable


def is_in(haystack: str, needle: str) -> bool:
    """True if needle occurs in haystack. Case-sensitive; lower-case the haystack first if needed."""
    return needle in haystack


def first_match(value: str, candidates: Iterable[str]) -> str | None:
    """
    Return the first candidate contained in value (compared lower-cased), or None.

    Order of candidates matters: "numeric-graphic" matches whichever comes first.
    """
    lowered = value.lower()
    for candidate in candidates:
        if is_in(lowered, candidate):
            return candidate
    return None
