"""
Feature Extraction Module

Available features:
- Readability statistics and formulas

Usage:
    from readmetrics.features import ReadabilityAnalyzer

    analyzer = ReadabilityAnalyzer()
    result = analyzer.analyze(text)
"""

# Use explicit imports: from readmetrics.features.readability import ReadabilityAnalyzer

__all__ = [
    "ReadabilityAnalyzer",
    "ReadabilityResult",
    "ReadabilityAnalysisResult",
]


def __getattr__(name):
    """Lazy import of feature classes."""
    if name == "ReadabilityAnalyzer":
        from .readability import ReadabilityAnalyzer
        return ReadabilityAnalyzer
    elif name == "ReadabilityResult":
        from .readability import ReadabilityResult
        return ReadabilityResult
    elif name == "ReadabilityAnalysisResult":
        from .readability import ReadabilityAnalysisResult
        return ReadabilityAnalysisResult
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
