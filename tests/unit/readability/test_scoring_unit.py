"""
Unit tests for readmetrics/features/readability/scoring.py and timing.py

Checks the six readability formulas against hand-computed values and the
half-away-from-zero rounding they share with the timing estimates.
"""

import pytest

from readmetrics.features.readability.scoring import (
    automated_readability_index,
    coleman_liau_index,
    flesch_kincaid_grade_level,
    flesch_kincaid_reading_ease,
    gunning_fog_score,
    round_half_away,
    smog_index,
)
from readmetrics.features.readability.timing import (
    reading_time_seconds,
    speaking_time_seconds,
)


class TestRoundHalfAway:
    """Ties round away from zero, unlike built-in round."""

    @pytest.mark.parametrize("value,precision,expected", [
        (2.25, 1, 2.3),
        (-1.25, 1, -1.3),
        (0.5, 0, 1.0),
        (1.5, 0, 2.0),
        (2.5, 0, 3.0),
        (-2.5, 0, -3.0),
        (13.594, 2, 13.59),
    ])
    def test_ties_away_from_zero(self, value: float, precision: int, expected: float):
        assert round_half_away(value, precision) == expected

    def test_differs_from_builtin_round(self):
        assert round(2.5) == 2
        assert round_half_away(2.5) == 3.0

    def test_returns_float(self):
        assert isinstance(round_half_away(7), float)


class TestFormulas:
    """Closed-form formulas at the default precision of 1."""

    def test_reading_ease(self):
        assert flesch_kincaid_reading_ease(6.0, 1.0) == 116.1

    def test_reading_ease_can_be_negative(self):
        assert flesch_kincaid_reading_ease(40.0, 3.0) < 0

    def test_grade_level(self):
        assert flesch_kincaid_grade_level(10.0, 1.5) == 6.0

    def test_gunning_fog_takes_fraction(self):
        assert gunning_fog_score(10.0, 0.1) == 8.0

    def test_gunning_fog_without_complex_words(self):
        assert gunning_fog_score(6.0, 0.0) == 2.4

    def test_coleman_liau(self):
        assert coleman_liau_index(50, 10, 2) == 13.6

    def test_coleman_liau_precision(self):
        assert coleman_liau_index(50, 10, 2, precision=2) == 13.59

    def test_smog_floor(self):
        """SMOG is positive even with no complex words."""
        assert smog_index(0, 1) == 1.8

    def test_smog(self):
        assert smog_index(10, 30) == 3.8

    def test_automated_readability_index(self):
        assert automated_readability_index(50, 10, 2) == 4.6

    def test_precision_zero(self):
        assert automated_readability_index(50, 10, 2, precision=0) == 5.0


class TestTiming:
    """Reading at 225 wpm and speaking at 125 wpm by default."""

    @pytest.mark.parametrize("words,expected", [
        (225, 60),
        (450, 120),
        (6, 2),
    ])
    def test_reading_time(self, words: int, expected: int):
        assert reading_time_seconds(words) == expected

    @pytest.mark.parametrize("words,expected", [
        (125, 60),
        (250, 120),
        (6, 3),
    ])
    def test_speaking_time(self, words: int, expected: int):
        assert speaking_time_seconds(words) == expected

    def test_custom_words_per_minute(self):
        assert reading_time_seconds(100, words_per_minute=200) == 30

    def test_returns_int(self):
        assert isinstance(reading_time_seconds(10), int)
        assert isinstance(speaking_time_seconds(10), int)

    def test_speaking_slower_than_reading(self):
        assert speaking_time_seconds(1000) > reading_time_seconds(1000)
