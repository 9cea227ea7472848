"""Small string algorithms: character frequency and run collapsing."""

from collections import Counter
from itertools import groupby

__all__ = ["highest_occurring_char", "remove_consecutive_duplicates"]


def highest_occurring_char(text: str) -> str:
    """Return the character that occurs most often in *text*.

    When several characters share the highest count, the one with the
    lowest code point wins.
    """
    if not text:
        raise ValueError("cannot find the most frequent character of an empty string")
    counts = Counter(text)
    return min(counts, key=lambda char: (-counts[char], char))


def remove_consecutive_duplicates(text: str) -> str:
    """Collapse every run of equal adjacent characters to a single one."""
    return "".join(char for char, _ in groupby(text))