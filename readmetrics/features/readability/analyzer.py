"""
Readability Analyzer

Computes letter, word, sentence and syllable statistics plus the classic
readability formulas for one text unit at a time, or for an ordered batch
of identified text units.

Usage:
    from readmetrics.features.readability import ReadabilityAnalyzer

    analyzer = ReadabilityAnalyzer()
    result = analyzer.analyze(raw_text)
    print(f"Gunning Fog: {result.gunning_fog_score}")

    results = analyzer.analyze_batch([("doc-1", text_1), ("doc-2", text_2)])
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

from readmetrics.config import settings
from readmetrics.utils.parallel import ParallelProcessor
from readmetrics.utils.worker_pool import analyze_batch_item, init_readability_worker
from .context import AnalysisContext
from .normalizer import TextNormalizer
from .schemas import (
    BatchItem,
    BatchResult,
    ReadabilityAnalysisMetadata,
    ReadabilityAnalysisResult,
    ReadabilityResult,
)
from .constants import (
    MIN_SENTENCE_COUNT_FOR_ANALYSIS,
    MIN_WORD_COUNT_FOR_ANALYSIS,
)

logger = logging.getLogger(__name__)

BatchInput = Union[BatchItem, Tuple[str, str]]


class ReadabilityAnalyzer:
    """
    Readability statistics extractor.

    This class:
    1. Loads timing and scoring configuration from settings
    2. Normalizes raw text into canonical text
    3. Wraps it in an AnalysisContext that computes each statistic once
    4. Returns an immutable ReadabilityResult (empty variant for texts
       without letters)

    The analyzer holds no per-text state; one instance can serve any
    number of texts.

    Usage:
        analyzer = ReadabilityAnalyzer()
        result = analyzer.analyze(text)
    """

    def __init__(
        self,
        config: Optional[object] = None,
        reading_words_per_minute: Optional[int] = None,
        speaking_words_per_minute: Optional[int] = None,
        precision: Optional[int] = None,
        max_workers: Optional[int] = None
    ):
        """
        Initialize readability analyzer.

        Args:
            config: Optional ReadabilityConfig object. If None, loads from settings.
            reading_words_per_minute: Override for the configured reading speed
            speaking_words_per_minute: Override for the configured speaking speed
            precision: Override for the configured formula precision
            max_workers: Override for the configured batch parallelism
        """
        self.config = config or settings.readability

        self.reading_words_per_minute = (
            reading_words_per_minute or self.config.timing.reading_words_per_minute
        )
        self.speaking_words_per_minute = (
            speaking_words_per_minute or self.config.timing.speaking_words_per_minute
        )
        self.precision = self.config.scoring.precision if precision is None else precision
        self.max_workers = max_workers or self.config.processing.max_workers

        self.normalizer = TextNormalizer()

        logger.debug(
            f"Initialized ReadabilityAnalyzer (reading {self.reading_words_per_minute} wpm, "
            f"speaking {self.speaking_words_per_minute} wpm, precision {self.precision})"
        )

    def create_context(self, text: str) -> AnalysisContext:
        """
        Normalize text and wrap it in a memoizing AnalysisContext.

        Args:
            text: Raw input text

        Returns:
            AnalysisContext for the canonical text
        """
        return AnalysisContext(
            self.normalizer.normalize(text),
            reading_words_per_minute=self.reading_words_per_minute,
            speaking_words_per_minute=self.speaking_words_per_minute,
            precision=self.precision,
        )

    def analyze(
        self,
        text: str,
        return_metadata: bool = False
    ) -> ReadabilityResult | ReadabilityAnalysisResult:
        """
        Analyze one text unit.

        Args:
            text: Raw input text (may be empty or contain markup)
            return_metadata: If True, return ReadabilityAnalysisResult with metadata.
                           If False (default), return only ReadabilityResult.

        Returns:
            ReadabilityResult or ReadabilityAnalysisResult
        """
        context = self.create_context(text)
        result = context.result

        if not return_metadata:
            return result

        metadata = ReadabilityAnalysisMetadata(
            text_length=context.length,
            warnings=self._collect_warnings(context),
            config_used=self._get_config_dict(),
        )
        return ReadabilityAnalysisResult(result=result, metadata=metadata)

    def analyze_item(self, item: BatchInput) -> BatchResult:
        """Analyze one identified text unit."""
        item = self._coerce_item(item)
        return BatchResult(identifier=item.identifier, result=self.analyze(item.text))

    def analyze_batch(
        self,
        items: Iterable[BatchInput],
        max_workers: Optional[int] = None
    ) -> List[BatchResult]:
        """
        Analyze an ordered batch of identified text units.

        Every input yields exactly one output, in input order, carrying the
        caller's identifier. With more than one worker the batch is spread
        over a process pool.

        Args:
            items: BatchItem objects or (identifier, text) tuples
            max_workers: Override for the analyzer's batch parallelism

        Returns:
            List of BatchResult, one per input, same order
        """
        batch = [self._coerce_item(item) for item in items]

        processor = ParallelProcessor(
            max_workers=max_workers or self.max_workers,
            initializer=init_readability_worker,
            initargs=(
                self.reading_words_per_minute,
                self.speaking_words_per_minute,
                self.precision,
            ),
            max_tasks_per_child=self.config.processing.max_tasks_per_child,
        )

        if not processor.should_use_parallel(len(batch)):
            return [self.analyze_item(item) for item in batch]

        return processor.process_batch(batch, analyze_batch_item)

    # ===========================
    # Private Helper Methods
    # ===========================

    @staticmethod
    def _coerce_item(item: BatchInput) -> BatchItem:
        if isinstance(item, BatchItem):
            return item
        identifier, text = item
        return BatchItem(identifier=str(identifier), text=text)

    def _collect_warnings(self, context: AnalysisContext) -> List[str]:
        """Flag texts too small for reliable readability scores."""
        warnings = []

        if context.letter_count == 0:
            warnings.append("No letters found; statistics left empty.")
            logger.debug("Text has no letters; returning empty result")
            return warnings

        if context.word_count < MIN_WORD_COUNT_FOR_ANALYSIS:
            warnings.append(
                f"Word count ({context.word_count}) below minimum ({MIN_WORD_COUNT_FOR_ANALYSIS}). "
                f"Results may be unreliable."
            )
        if context.sentence_count < MIN_SENTENCE_COUNT_FOR_ANALYSIS:
            warnings.append(
                f"Sentence count ({context.sentence_count}) below minimum "
                f"({MIN_SENTENCE_COUNT_FOR_ANALYSIS}). Results may be unreliable."
            )
        return warnings

    def _get_config_dict(self) -> dict:
        """Get effective configuration as dictionary for metadata."""
        return {
            "reading_words_per_minute": self.reading_words_per_minute,
            "speaking_words_per_minute": self.speaking_words_per_minute,
            "precision": self.precision,
        }


_default_analyzer: Optional[ReadabilityAnalyzer] = None


def _get_default_analyzer() -> ReadabilityAnalyzer:
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = ReadabilityAnalyzer()
    return _default_analyzer


def analyze(raw_text: str) -> ReadabilityResult:
    """
    Convenience function to analyze one text with the configured defaults.

    Args:
        raw_text: Raw text to analyze

    Returns:
        ReadabilityResult
    """
    return _get_default_analyzer().analyze(raw_text)


def analyze_batch(items: Iterable[BatchInput]) -> List[BatchResult]:
    """
    Convenience function to analyze an identified batch with the configured defaults.

    Args:
        items: BatchItem objects or (identifier, text) tuples

    Returns:
        List of BatchResult in input order
    """
    return _get_default_analyzer().analyze_batch(items)
