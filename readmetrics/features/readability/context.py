"""
Analysis context: one canonical text and its lazily computed statistics.

Every statistic is computed on first access and cached for the lifetime of
the context, so the syllable estimator runs over the text at most once no
matter how many derived metrics read it.

A context is not meant to be shared between threads. Independent contexts
share no state and can be evaluated in parallel.
"""

from functools import cached_property

from . import counters, scoring, timing
from .constants import (
    DEFAULT_READING_WORDS_PER_MINUTE,
    DEFAULT_SCORE_PRECISION,
    DEFAULT_SPEAKING_WORDS_PER_MINUTE,
)
from .normalizer import normalize
from .schemas import ReadabilityResult, SyllableStatistics
from .syllables import analyze_syllables


class AnalysisContext:
    """
    Memoizing holder of readability statistics for one canonical text.

    Usage:
        context = AnalysisContext.from_raw("The cat sat on the mat.")
        context.word_count        # 6
        context.result            # ReadabilityResult
    """

    def __init__(
        self,
        clean_text: str,
        reading_words_per_minute: int = DEFAULT_READING_WORDS_PER_MINUTE,
        speaking_words_per_minute: int = DEFAULT_SPEAKING_WORDS_PER_MINUTE,
        precision: int = DEFAULT_SCORE_PRECISION
    ):
        """
        Initialize context.

        Args:
            clean_text: Canonical text (output of normalize)
            reading_words_per_minute: Silent reading speed for timing
            speaking_words_per_minute: Speaking speed for timing
            precision: Decimal places for readability formulas
        """
        self._text = clean_text
        self._reading_wpm = reading_words_per_minute
        self._speaking_wpm = speaking_words_per_minute
        self._precision = precision

    @classmethod
    def from_raw(cls, raw_text: str, **kwargs) -> 'AnalysisContext':
        """Normalize raw text and wrap it in a context."""
        return cls(normalize(raw_text), **kwargs)

    @property
    def clean_text(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        """Character length of the canonical text."""
        return len(self._text)

    # ===========================
    # Lexical Counters
    # ===========================

    @cached_property
    def letter_count(self) -> int:
        return counters.letter_count(self._text)

    @cached_property
    def sentence_count(self) -> int:
        return counters.sentence_count(self._text)

    @cached_property
    def word_count(self) -> int:
        return counters.word_count(self._text)

    # ===========================
    # Syllable Aggregates
    # ===========================

    @cached_property
    def syllable_statistics(self) -> SyllableStatistics:
        return analyze_syllables(self._text)

    @property
    def syllable_total(self) -> int:
        return self.syllable_statistics.total

    @property
    def words_with_three_or_more_syllables(self) -> int:
        return self.syllable_statistics.three_or_more

    @property
    def proper_noun_excluded_three_syllable_count(self) -> int:
        return self.syllable_statistics.three_or_more_excluding_capitalized

    # ===========================
    # Derived Ratios
    # ===========================

    @cached_property
    def average_syllables_per_word(self) -> float:
        return self.syllable_total / self.word_count

    @cached_property
    def average_words_per_sentence(self) -> float:
        return self.word_count / self.sentence_count

    @cached_property
    def percentage_words_with_three_syllables(self) -> float:
        """Fraction (0-1) of words with 3+ syllables, capitalized words excluded."""
        return self.proper_noun_excluded_three_syllable_count / self.word_count

    # ===========================
    # Scores
    # ===========================

    @cached_property
    def flesch_kincaid_reading_ease(self) -> float:
        return scoring.flesch_kincaid_reading_ease(
            self.average_words_per_sentence,
            self.average_syllables_per_word,
            self._precision
        )

    @cached_property
    def flesch_kincaid_grade_level(self) -> float:
        return scoring.flesch_kincaid_grade_level(
            self.average_words_per_sentence,
            self.average_syllables_per_word,
            self._precision
        )

    @cached_property
    def gunning_fog_score(self) -> float:
        return scoring.gunning_fog_score(
            self.average_words_per_sentence,
            self.percentage_words_with_three_syllables,
            self._precision
        )

    @cached_property
    def coleman_liau_index(self) -> float:
        return scoring.coleman_liau_index(
            self.letter_count, self.word_count, self.sentence_count, self._precision
        )

    @cached_property
    def smog_index(self) -> float:
        return scoring.smog_index(
            self.words_with_three_or_more_syllables, self.sentence_count, self._precision
        )

    @cached_property
    def automated_readability_index(self) -> float:
        return scoring.automated_readability_index(
            self.letter_count, self.word_count, self.sentence_count, self._precision
        )

    # ===========================
    # Timing
    # ===========================

    @cached_property
    def reading_time_seconds(self) -> int:
        return timing.reading_time_seconds(self.word_count, self._reading_wpm)

    @cached_property
    def speaking_time_seconds(self) -> int:
        return timing.speaking_time_seconds(self.word_count, self._speaking_wpm)

    # ===========================
    # Result
    # ===========================

    @cached_property
    def result(self) -> ReadabilityResult:
        """
        Final result record.

        Texts without letters yield ReadabilityResult.empty and no formula
        is evaluated.
        """
        if self.letter_count == 0:
            return ReadabilityResult.empty(self._text)

        return ReadabilityResult(
            letter_count=self.letter_count,
            word_count=self.word_count,
            average_syllables_per_word=self.average_syllables_per_word,
            sentence_count=self.sentence_count,
            average_words_per_sentence=self.average_words_per_sentence,
            reading_time_seconds=self.reading_time_seconds,
            speaking_time_seconds=self.speaking_time_seconds,
            flesch_kincaid_reading_ease=self.flesch_kincaid_reading_ease,
            flesch_kincaid_grade_level=self.flesch_kincaid_grade_level,
            gunning_fog_score=self.gunning_fog_score,
            coleman_liau_index=self.coleman_liau_index,
            smog_index=self.smog_index,
            automated_readability_index=self.automated_readability_index,
            clean_text=self._text,
        )
