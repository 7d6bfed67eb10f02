"""
Readability formulas.

Each formula is a closed-form expression over lexical aggregates and is
rounded half away from zero (2.25 -> 2.3, -1.25 -> -1.3). Python's
built-in ``round`` rounds half to even, so rounding goes through
``decimal`` on the shortest repr of the float.

Word and sentence counts are always >= 1 (see counters.py), so no
formula divides by zero.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from .constants import (
    ARI_LETTER_WEIGHT,
    ARI_OFFSET,
    ARI_SENTENCE_WEIGHT,
    COLEMAN_LIAU_LETTER_WEIGHT,
    COLEMAN_LIAU_OFFSET,
    COLEMAN_LIAU_SENTENCE_WEIGHT,
    DEFAULT_SCORE_PRECISION,
    GRADE_LEVEL_OFFSET,
    GRADE_LEVEL_SENTENCE_WEIGHT,
    GRADE_LEVEL_SYLLABLE_WEIGHT,
    GUNNING_FOG_WEIGHT,
    READING_EASE_BASE,
    READING_EASE_SENTENCE_WEIGHT,
    READING_EASE_SYLLABLE_WEIGHT,
    SMOG_OFFSET,
    SMOG_SAMPLE_SENTENCES,
    SMOG_WEIGHT,
)


def round_half_away(value: float, precision: int = 0) -> float:
    """
    Round to ``precision`` decimal places, ties away from zero.

    Args:
        value: Number to round
        precision: Decimal places to keep

    Returns:
        float: Rounded value
    """
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def flesch_kincaid_reading_ease(
    average_words_per_sentence: float,
    average_syllables_per_word: float,
    precision: int = DEFAULT_SCORE_PRECISION
) -> float:
    """206.835 - 1.015 × (words/sentences) - 84.6 × (syllables/words)."""
    score = (
        READING_EASE_BASE
        - READING_EASE_SENTENCE_WEIGHT * average_words_per_sentence
        - READING_EASE_SYLLABLE_WEIGHT * average_syllables_per_word
    )
    return round_half_away(score, precision)


def flesch_kincaid_grade_level(
    average_words_per_sentence: float,
    average_syllables_per_word: float,
    precision: int = DEFAULT_SCORE_PRECISION
) -> float:
    """0.39 × (words/sentences) + 11.8 × (syllables/words) - 15.59."""
    score = (
        GRADE_LEVEL_SENTENCE_WEIGHT * average_words_per_sentence
        + GRADE_LEVEL_SYLLABLE_WEIGHT * average_syllables_per_word
        - GRADE_LEVEL_OFFSET
    )
    return round_half_away(score, precision)


def gunning_fog_score(
    average_words_per_sentence: float,
    complex_word_ratio: float,
    precision: int = DEFAULT_SCORE_PRECISION
) -> float:
    """
    0.4 × [(words/sentences) + 100 × (complex_words/words)].

    Args:
        average_words_per_sentence: Words per sentence
        complex_word_ratio: Fraction (0-1) of words with 3+ syllables,
            excluding capitalized words
        precision: Decimal places
    """
    score = (average_words_per_sentence + complex_word_ratio * 100) * GUNNING_FOG_WEIGHT
    return round_half_away(score, precision)


def coleman_liau_index(
    letters: int,
    words: int,
    sentences: int,
    precision: int = DEFAULT_SCORE_PRECISION
) -> float:
    """5.89 × (letters/words) - 0.3 × (sentences/words) - 15.8."""
    score = (
        COLEMAN_LIAU_LETTER_WEIGHT * (letters / words)
        - COLEMAN_LIAU_SENTENCE_WEIGHT * (sentences / words)
        - COLEMAN_LIAU_OFFSET
    )
    return round_half_away(score, precision)


def smog_index(
    complex_words: int,
    sentences: int,
    precision: int = DEFAULT_SCORE_PRECISION
) -> float:
    """1.043 × sqrt(complex_words × (30/sentences) + 3.1291)."""
    score = SMOG_WEIGHT * math.sqrt(
        complex_words * (SMOG_SAMPLE_SENTENCES / sentences) + SMOG_OFFSET
    )
    return round_half_away(score, precision)


def automated_readability_index(
    letters: int,
    words: int,
    sentences: int,
    precision: int = DEFAULT_SCORE_PRECISION
) -> float:
    """4.71 × (letters/words) + 0.5 × (words/sentences) - 21.43."""
    score = (
        ARI_LETTER_WEIGHT * (letters / words)
        + ARI_SENTENCE_WEIGHT * (words / sentences)
        - ARI_OFFSET
    )
    return round_half_away(score, precision)
