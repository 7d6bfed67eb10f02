"""
Reading and speaking time estimates.

Time scales linearly with word count; rounding (half away from zero, to
whole seconds) is applied only to the final value.
"""

from .constants import (
    DEFAULT_READING_WORDS_PER_MINUTE,
    DEFAULT_SPEAKING_WORDS_PER_MINUTE,
    SECONDS_PER_MINUTE,
)
from .scoring import round_half_away


def _seconds(words: int, words_per_minute: int) -> int:
    return int(round_half_away(SECONDS_PER_MINUTE / words_per_minute * words))


def reading_time_seconds(
    words: int,
    words_per_minute: int = DEFAULT_READING_WORDS_PER_MINUTE
) -> int:
    """Seconds needed to read ``words`` silently."""
    return _seconds(words, words_per_minute)


def speaking_time_seconds(
    words: int,
    words_per_minute: int = DEFAULT_SPEAKING_WORDS_PER_MINUTE
) -> int:
    """Seconds needed to read ``words`` aloud."""
    return _seconds(words, words_per_minute)
