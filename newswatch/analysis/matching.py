"""
Pattern matching helpers.

All functions are pure: they take compiled patterns or literal phrases plus
the text and return a fresh result on every call.
"""

import re
from collections.abc import Iterable


def matches_any(patterns: Iterable[re.Pattern], text: str) -> bool:
    """True if any pattern matches; a detector counts once per title."""
    return any(p.search(text) for p in patterns)


def count_occurrences(pattern: re.Pattern, text: str) -> int:
    """Number of non-overlapping matches of pattern in text."""
    return sum(1 for _ in pattern.finditer(text))


def find_phrases(text: str, phrases: Iterable[str]) -> list[str]:
    """
    Literal phrases contained in text, case-insensitive.

    Returned in configuration order with duplicates removed, so the result
    can be shown as provenance for a match.
    """
    lower_text = text.lower()
    found: list[str] = []
    for phrase in phrases:
        if phrase and phrase.lower() in lower_text and phrase not in found:
            found.append(phrase)
    return found


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    lower_text = text.lower()
    return any(phrase and phrase.lower() in lower_text for phrase in phrases)
