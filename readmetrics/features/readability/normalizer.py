"""
Text normalization for readability analysis.

Turns arbitrary (possibly markup-bearing) text into canonical text:
markup removed, every sentence terminated by a single period, whitespace
collapsed to single spaces, and a trailing period at the end.

The steps run in a fixed order; later steps rely on the output of earlier
ones and the readability formulas are defined relative to this exact
normalization.

Usage:
    from readmetrics.features.readability.normalizer import normalize

    canonical = normalize("<p>Hello</p><p>World!</p>")
    # -> "Hello. world."
"""

import re

from .constants import CANONICAL_TERMINATOR, FULL_STOP_TAGS

_CLOSING_BLOCK_TAG = re.compile(
    r"</(?:" + "|".join(FULL_STOP_TAGS) + r")>",
    re.IGNORECASE
)
# Best-effort; nested or unbalanced markup can leave stray characters.
_MARKUP = re.compile(r"<[^>]+>")
_SEPARATORS = re.compile(r'[",:;()\-]')
_TERMINATORS = re.compile(r"[.!?]")
_WHITESPACE = re.compile(r"\s+")
_REPEATED_TERMINATORS = re.compile(r"\.[. ]+")
_TERMINATOR_PADDING = re.compile(r" *\.")
# Lookbehind so a one-word sentence does not consume the next terminator
_SENTENCE_START = re.compile(r"(?<=\. )[^ ]+")


class TextNormalizer:
    """
    Normalizes raw text into canonical text for readability statistics.

    Steps (in order):
    1. Closing block tags (li, p, h1-h6, dd) become sentence breaks
    2. Remaining markup is stripped
    3. Quotes, commas, colons, semicolons, parentheses and hyphens become spaces
    4. ! and ? are unified to .
    5. Text is trimmed and a final terminator appended
    6. Whitespace runs collapse to a single space
    7. Repeated terminators collapse to one
    8. Every terminator is followed by exactly one space; trailing space trimmed
    9. The first word of every sentence after the first is lower-cased

    Step 9 stops sentence-initial words from being treated as proper nouns
    by the Gunning Fog complex-word count.

    Usage:
        normalizer = TextNormalizer()
        canonical = normalizer.normalize(raw_text)
    """

    def normalize(self, text: str) -> str:
        """
        Normalize raw text into canonical text.

        Args:
            text: Raw input text (may be empty or contain markup)

        Returns:
            str: Canonical text, at least "."
        """
        text = self._mark_block_boundaries(text or "")
        text = self._strip_markup(text)
        text = self._replace_separators(text)
        text = self._unify_terminators(text)
        text = text.strip() + CANONICAL_TERMINATOR
        text = self._collapse_whitespace(text)
        text = self._collapse_terminators(text)
        text = self._pad_terminators(text)
        text = self._lowercase_sentence_starts(text)

        return text

    def _mark_block_boundaries(self, text: str) -> str:
        """Replace closing block-level tags with a terminator."""
        return _CLOSING_BLOCK_TAG.sub(CANONICAL_TERMINATOR, text)

    def _strip_markup(self, text: str) -> str:
        """Remove anything that looks like a tag."""
        return _MARKUP.sub("", text)

    def _replace_separators(self, text: str) -> str:
        """Turn word-separating punctuation into spaces."""
        return _SEPARATORS.sub(" ", text)

    def _unify_terminators(self, text: str) -> str:
        """Map every sentence terminator onto a period."""
        return _TERMINATORS.sub(CANONICAL_TERMINATOR, text)

    def _collapse_whitespace(self, text: str) -> str:
        """Replace newlines, tabs and space runs with a single space."""
        return _WHITESPACE.sub(" ", text)

    def _collapse_terminators(self, text: str) -> str:
        """Collapse runs of terminators (with interleaved spaces) into one."""
        return _REPEATED_TERMINATORS.sub(CANONICAL_TERMINATOR, text)

    def _pad_terminators(self, text: str) -> str:
        """Put exactly one space after every terminator, none before."""
        return _TERMINATOR_PADDING.sub(". ", text).rstrip()

    def _lowercase_sentence_starts(self, text: str) -> str:
        """Lower-case the first word following each terminator."""
        return _SENTENCE_START.sub(lambda match: match.group(0).lower(), text)


_default_normalizer = TextNormalizer()


def normalize(raw_text: str) -> str:
    """
    Convenience function to normalize text with the default normalizer.

    Args:
        raw_text: Raw text to normalize

    Returns:
        str: Canonical text
    """
    return _default_normalizer.normalize(raw_text)
