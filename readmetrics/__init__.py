"""
Readability metrics for plain and markup-bearing text.

Usage:
    import readmetrics

    result = readmetrics.analyze("The cat sat on the mat.")
    result.flesch_kincaid_reading_ease  # 116.1
"""

from readmetrics.features.readability import (
    ReadabilityAnalyzer,
    ReadabilityResult,
    BatchItem,
    BatchResult,
    analyze,
    analyze_batch,
    normalize,
    syllable_count,
)
from readmetrics.features.readability.constants import READABILITY_MODULE_VERSION

__version__ = READABILITY_MODULE_VERSION

__all__ = [
    "ReadabilityAnalyzer",
    "ReadabilityResult",
    "BatchItem",
    "BatchResult",
    "analyze",
    "analyze_batch",
    "normalize",
    "syllable_count",
]
