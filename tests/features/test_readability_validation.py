"""
Readability Analysis Validation Tests.

These tests validate whole-pipeline behaviour over a small synthetic corpus:
structural properties every result must satisfy, and the direction in which
the readability indices move as text gets harder.

No file dependencies - these tests can run in any environment.
"""

from typing import Dict, List

import numpy as np
import pytest

from readmetrics.features.readability import (
    ReadabilityAnalyzer,
    ReadabilityResult,
    analyze_syllables,
    normalize,
)


@pytest.fixture
def graded_texts(sample_corpus: Dict[str, str]) -> List[str]:
    """Texts ordered from easiest to hardest."""
    return [
        "The cat sat. The dog ran. It was fun.",
        "The small dog ran to the park. It saw a big red ball. The boy threw it far.",
        (
            "Yesterday the children visited a museum downtown. Their guide "
            "described several paintings carefully. Everyone listened with "
            "genuine interest."
        ),
        sample_corpus["dense"],
    ]


class TestStructuralProperties:
    """Invariants that hold for every text in the corpus."""

    def test_normalization_idempotent(self, sample_corpus: Dict[str, str]):
        for name, text in sample_corpus.items():
            once = normalize(text)
            assert normalize(once) == once, f"{name}: normalization not idempotent"

    def test_clean_text_terminated(self, analyzer: ReadabilityAnalyzer, sample_corpus):
        for name, text in sample_corpus.items():
            result = analyzer.analyze(text)
            assert result.clean_text.endswith("."), f"{name}: missing terminator"
            assert "  " not in result.clean_text, f"{name}: double space"

    def test_counts_and_ranges(self, analyzer: ReadabilityAnalyzer, sample_corpus):
        for name, text in sample_corpus.items():
            result = analyzer.analyze(text)
            if result.is_empty:
                continue
            assert result.sentence_count >= 1, name
            assert result.word_count >= 1, name
            assert result.average_syllables_per_word >= 1.0, name
            assert result.smog_index > 0, name
            assert result.reading_time_seconds <= result.speaking_time_seconds, name

    def test_letterless_corpus_entries_empty(self, analyzer: ReadabilityAnalyzer, sample_corpus):
        for name in ("numbers", "empty", "whitespace"):
            result = analyzer.analyze(sample_corpus[name])
            assert result.is_empty, name
            assert result.to_row()[2:] == [""] * 11, name


class TestPinnedCorpus:
    """Exact normalization of the markup-bearing corpus entries."""

    def test_markup(self, analyzer: ReadabilityAnalyzer, sample_corpus):
        result = analyzer.analyze(sample_corpus["markup"])
        assert result.clean_text == (
            "Release notes. the parser is faster. fixed a crash. improved memory usage."
        )
        assert result.sentence_count == 4

    def test_shouting(self, analyzer: ReadabilityAnalyzer, sample_corpus):
        result = analyzer.analyze(sample_corpus["shouting"])
        assert result.clean_text == "WHAT IS THIS. nobody KNOWS. really."
        assert result.sentence_count == 3

    def test_broken_markup(self, analyzer: ReadabilityAnalyzer, sample_corpus):
        result = analyzer.analyze(sample_corpus["broken_markup"])
        assert result.clean_text == "Text with unclosed tags and a < stray bracket."

    def test_exception_word_in_sentence(self):
        stats = analyze_syllables("Penelope met Zoe at the cafe.")
        # Penelope 4, met 1, Zoe 2, at 1, the 1, cafe 2
        assert stats.total == 11
        assert stats.three_or_more_excluding_capitalized == 0


class TestIndexDirection:
    """Indices agree on which texts are harder."""

    def _scores(self, analyzer: ReadabilityAnalyzer, texts: List[str]) -> Dict[str, np.ndarray]:
        results: List[ReadabilityResult] = [analyzer.analyze(text) for text in texts]
        return {
            'fk': np.array([r.flesch_kincaid_grade_level for r in results]),
            'fog': np.array([r.gunning_fog_score for r in results]),
            'fre': np.array([r.flesch_kincaid_reading_ease for r in results]),
            'ari': np.array([r.automated_readability_index for r in results]),
        }

    def test_grade_levels_increase(self, analyzer: ReadabilityAnalyzer, graded_texts):
        scores = self._scores(analyzer, graded_texts)
        assert np.all(np.diff(scores['fk']) > 0), f"FK grades not increasing: {scores['fk']}"
        assert np.all(np.diff(scores['fog']) > 0), f"Fog not increasing: {scores['fog']}"
        assert np.all(np.diff(scores['ari']) > 0), f"ARI not increasing: {scores['ari']}"

    def test_reading_ease_decreases(self, analyzer: ReadabilityAnalyzer, graded_texts):
        scores = self._scores(analyzer, graded_texts)
        assert np.all(np.diff(scores['fre']) < 0), f"Reading ease not decreasing: {scores['fre']}"

    def test_readability_metric_correlation(self, analyzer: ReadabilityAnalyzer, graded_texts):
        """
        Metric: Pearson correlation between grade-style indices.
        Target: All pairs > 0.7.
        """
        scores = self._scores(analyzer, graded_texts)
        scores['fre'] = -scores['fre']

        names = list(scores)
        for i, first in enumerate(names):
            for second in names[i + 1:]:
                corr = np.corrcoef(scores[first], scores[second])[0, 1]
                assert corr > 0.7, f"{first}/{second} correlation {corr:.2f} below 0.7"

    def test_appending_text_never_shortens(self, analyzer: ReadabilityAnalyzer, sample_corpus):
        base = sample_corpus["plain"]
        longer = base + " " + sample_corpus["nursery"]

        short_result = analyzer.analyze(base)
        long_result = analyzer.analyze(longer)

        assert long_result.word_count > short_result.word_count
        assert long_result.sentence_count > short_result.sentence_count
        assert long_result.reading_time_seconds >= short_result.reading_time_seconds
