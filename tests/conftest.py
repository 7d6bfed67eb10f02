"""
Shared pytest fixtures for the readability test suite.

This module provides common fixtures used across test modules:
- Analyzer instances
- Sample texts (plain, markup-bearing, degenerate)
- A small corpus for property-style validation

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import pytest
from pathlib import Path
from typing import Dict
import sys

# Ensure readmetrics is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from readmetrics.config import clear_config_cache
from readmetrics.features.readability import ReadabilityAnalyzer


# ===========================
# Analyzer Fixtures
# ===========================

@pytest.fixture
def analyzer() -> ReadabilityAnalyzer:
    """Analyzer with default timing and precision, sequential batches."""
    return ReadabilityAnalyzer(
        reading_words_per_minute=225,
        speaking_words_per_minute=125,
        precision=1,
        max_workers=1,
    )


@pytest.fixture
def fresh_config_cache():
    """Clear cached YAML before and after a test that touches configuration."""
    clear_config_cache()
    yield
    clear_config_cache()


# ===========================
# Corpus Fixtures
# ===========================

@pytest.fixture(scope="session")
def sample_corpus() -> Dict[str, str]:
    """Small corpus spanning easy prose, dense prose, markup and degenerate input."""
    return {
        "nursery": "The cat sat on the mat. The dog ran to the cat. It was fun.",
        "plain": (
            "We read the report on Monday. It was short and clear. "
            "Most of the team liked it."
        ),
        "dense": (
            "Notwithstanding considerable organizational uncertainty, the "
            "administration characterized the unprecedented reorganization as "
            "fundamentally beneficial; comprehensive documentation, however, "
            "remained conspicuously unavailable."
        ),
        "markup": (
            "<h1>Release notes</h1><p>The parser is faster.</p>"
            "<ul><li>Fixed a crash</li><li>Improved memory usage</li></ul>"
        ),
        "shouting": "WHAT IS THIS?! NOBODY KNOWS!!! Really...",
        "numbers": "123 456.",
        "empty": "",
        "whitespace": " \n\t ",
        "unicode": "Café naïve résumé — déjà vu.",
        "broken_markup": "Text with <b>unclosed <i>tags and a < stray bracket.",
    }
