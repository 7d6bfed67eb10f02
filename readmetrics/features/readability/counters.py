"""
Lexical counters over canonical text.

Sentence and word counts are floored at 1 so that every readability
formula has a non-zero denominator. The floor is a silent correction:
canonical text always carries at least one terminator and one token.
"""

import re

from .constants import CANONICAL_TERMINATOR

_NON_LETTERS = re.compile(r"[^A-Za-z]+")


def letter_count(text: str) -> int:
    """Count ASCII letters, ignoring every other character."""
    return len(_NON_LETTERS.sub("", text))


def sentence_count(text: str) -> int:
    """Count sentence terminators (minimum 1)."""
    return max(1, text.count(CANONICAL_TERMINATOR))


def word_count(text: str) -> int:
    """Count space-delimited tokens (minimum 1)."""
    return max(1, text.count(" ") + 1)


def tokenize(text: str) -> list[str]:
    """Split canonical text into its space-delimited tokens."""
    return text.split(" ")
