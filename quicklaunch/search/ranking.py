"""
Name matching and ordering shared by the app and file sources.

Prefix matches sort before substring matches; ties break on the
case-insensitive name, then the exact name, so the order is stable for
any fixed catalog and query.
"""

import re
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

WORD_SPLIT = re.compile(r"[\s\-_]")


def name_matches(name: str, query: str, by_word: bool = False) -> bool:
    """
    Check a name against a lower-cased query.

    Args:
        name: Display name of a catalog entry
        query: Lower-cased, trimmed query
        by_word: Also accept names where any whitespace/hyphen/underscore
            delimited word starts with the query
    """
    lowered = name.lower()
    if query in lowered:
        return True
    if by_word:
        return any(word.startswith(query) for word in WORD_SPLIT.split(lowered) if word)
    return False


def rank_by_name(entries: Iterable[T], query: str, name_of: Callable[[T], str]) -> list[T]:
    """Sort matched entries: prefix matches first, then by name."""
    def sort_key(entry):
        name = name_of(entry)
        lowered = name.lower()
        return (0 if lowered.startswith(query) else 1, lowered, name)

    return sorted(entries, key=sort_key)
