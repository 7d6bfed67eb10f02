"""
Readability and Text Statistics Module

This package computes letter, word, sentence and syllable counts, reading
and speaking time estimates, and the classic readability formulas
(Flesch-Kincaid Reading Ease and Grade Level, Gunning Fog, Coleman-Liau,
SMOG, Automated Readability Index) for plain or markup-bearing text.

Key Components:
- ReadabilityAnalyzer: Main entry point (single texts and batches)
- AnalysisContext: Memoizing statistics holder for one canonical text
- ReadabilityResult: Pydantic model for the result record
- normalize / syllable_count: Text normalizer and syllable estimator

Usage:
    from readmetrics.features.readability import ReadabilityAnalyzer

    analyzer = ReadabilityAnalyzer()
    result = analyzer.analyze(text)
    print(f"Reading ease: {result.flesch_kincaid_reading_ease}")
"""

from .analyzer import ReadabilityAnalyzer, analyze, analyze_batch
from .context import AnalysisContext
from .normalizer import TextNormalizer, normalize
from .syllables import syllable_count, analyze_syllables
from .schemas import (
    SyllableStatistics,
    ReadabilityResult,
    ReadabilityAnalysisMetadata,
    ReadabilityAnalysisResult,
    BatchItem,
    BatchResult,
)
from .constants import (
    READABILITY_MODULE_NAME,
    READABILITY_MODULE_VERSION,
    STANDARD_READABILITY_INDICES,
    OUTPUT_HEADER,
)

__all__ = [
    # Main classes
    "ReadabilityAnalyzer",
    "AnalysisContext",
    "TextNormalizer",
    # Functions
    "analyze",
    "analyze_batch",
    "normalize",
    "syllable_count",
    "analyze_syllables",
    # Schemas
    "SyllableStatistics",
    "ReadabilityResult",
    "ReadabilityAnalysisMetadata",
    "ReadabilityAnalysisResult",
    "BatchItem",
    "BatchResult",
    # Constants
    "READABILITY_MODULE_NAME",
    "READABILITY_MODULE_VERSION",
    "STANDARD_READABILITY_INDICES",
    "OUTPUT_HEADER",
]

__version__ = READABILITY_MODULE_VERSION
