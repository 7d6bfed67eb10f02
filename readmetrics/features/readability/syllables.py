"""
Rule-based syllable estimation.

Syllables are approximated without phonetic analysis:

1. Clean the word (lower-case ASCII letters only)
2. Look it up in an exception dictionary of irregular words
3. Strip single-syllable prefixes/suffixes, counting one syllable each
4. Count vowel groups in what remains
5. Subtract one per matching "over-counted" pattern
6. Add one per matching "under-counted" pattern
7. Clamp to at least one syllable

Pattern matching in steps 5 and 6 runs against the word left after step 3.

Usage:
    from readmetrics.features.readability.syllables import syllable_count

    syllable_count("beautiful")  # -> 3
"""

import re
from functools import lru_cache

from .constants import (
    ADD_SYLLABLE_PATTERNS,
    COMPLEX_WORD_SYLLABLES,
    PREFIX_SUFFIX_PATTERNS,
    SUBTRACT_SYLLABLE_PATTERNS,
    SYLLABLE_EXCEPTIONS,
)
from .counters import tokenize
from .schemas import SyllableStatistics

_NON_LOWERCASE_LETTERS = re.compile(r"[^a-z]")
_NON_VOWELS = re.compile(r"[^aeiouy]+")
_CAPITALIZED = re.compile(r"^[A-Z]")


def clean_word(word: str) -> str:
    """Lower-case a token and drop everything that is not a-z."""
    return _NON_LOWERCASE_LETTERS.sub("", word.lower())


def _strip_affixes(word: str) -> tuple[str, int]:
    """
    Strip single-syllable prefixes and suffixes in table order.

    Each strip applies to the word left by the previous ones.

    Returns:
        Tuple of (remaining_word, syllables_stripped)
    """
    stripped = 0
    for pattern in PREFIX_SUFFIX_PATTERNS:
        if pattern.search(word):
            word = pattern.sub("", word)
            stripped += 1
    return word, stripped


def _vowel_groups(word: str) -> int:
    """Count runs of vowels (a, e, i, o, u, y)."""
    return sum(1 for part in _NON_VOWELS.split(word) if part)


@lru_cache(maxsize=65536)
def syllable_count(word: str) -> int:
    """
    Estimate the number of syllables in a word.

    Args:
        word: Raw token; case and non-letters are ignored

    Returns:
        int: Estimated syllables, at least 1
    """
    word = clean_word(word)

    if word in SYLLABLE_EXCEPTIONS:
        return SYLLABLE_EXCEPTIONS[word]

    word, count = _strip_affixes(word)
    count += _vowel_groups(word)

    for pattern in SUBTRACT_SYLLABLE_PATTERNS:
        if pattern.search(word):
            count -= 1

    for pattern in ADD_SYLLABLE_PATTERNS:
        if pattern.search(word):
            count += 1

    return max(1, count)


def is_capitalized(token: str) -> bool:
    """True if the token starts with an uppercase ASCII letter."""
    return _CAPITALIZED.match(token) is not None


def analyze_syllables(text: str) -> SyllableStatistics:
    """
    Aggregate syllable statistics over every token of canonical text.

    Args:
        text: Canonical text (see normalizer.normalize)

    Returns:
        SyllableStatistics with the syllable total, the number of 3+ syllable
        tokens, and the same count skipping capitalized tokens
    """
    total = 0
    complex_words = 0
    complex_words_lowercase = 0

    for token in tokenize(text):
        syllables = syllable_count(token)
        total += syllables
        if syllables >= COMPLEX_WORD_SYLLABLES:
            complex_words += 1
            if not is_capitalized(token):
                complex_words_lowercase += 1

    return SyllableStatistics(
        total=total,
        three_or_more=complex_words,
        three_or_more_excluding_capitalized=complex_words_lowercase,
    )
