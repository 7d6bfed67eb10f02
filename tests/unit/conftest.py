"""
Lightweight fixtures for unit tests - NO file or process dependencies.
All fixtures use synthetic text that runs in <1 second.
"""

import pytest


# =============================================================================
# Text Fixtures
# =============================================================================

@pytest.fixture
def cat_text() -> str:
    """Six monosyllabic words in one sentence."""
    return "The cat sat on the mat."


@pytest.fixture
def two_paragraph_html() -> str:
    """Two paragraphs; each closing tag is a sentence boundary."""
    return "<p>Hello</p><p>World</p>"


@pytest.fixture
def letterless_text() -> str:
    """Digits and punctuation only."""
    return "123 456."


@pytest.fixture
def proper_noun_text() -> str:
    """Two complex words, one of them capitalized."""
    return "Penelope bought beautiful furniture."
