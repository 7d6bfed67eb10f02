"""
Immutable constants for readability and text complexity analysis.

This module contains version-controlled metadata and reference data.
These values should NEVER change at runtime - they define WHAT readability analysis IS.

Constants include:
- Module metadata (name, version, description)
- Readability indices metadata (descriptions, citations)
- Normalization tables (block-level tags, punctuation classes)
- Syllable estimation tables (exception words, ordered pattern rules)
- Formula coefficients and words-per-minute defaults
- Output header and reading-ease benchmarks

The syllable pattern tables are ORDERED tuples. Reordering them changes the
estimate for words that match several rules.

For runtime configuration (HOW to use readability), see readmetrics/configs/readability.yaml
"""

import re
from typing import Final

# ===========================
# Module Metadata
# ===========================

READABILITY_MODULE_NAME: Final[str] = "Readability Metrics"
"""Display name of the readability analysis module."""

READABILITY_MODULE_VERSION: Final[str] = "1.0.2"
"""Version of the readability analysis module."""

READABILITY_MODULE_DESCRIPTION: Final[str] = (
    "Generate information about text including syllable counts and "
    "Flesch-Kincaid, Gunning-Fog, Coleman-Liau, SMOG and Automated Readability scores."
)
"""Module description."""

# ===========================
# Academic Citations
# ===========================

READABILITY_CITATIONS: Final[dict[str, str]] = {
    "flesch_1948": (
        "Flesch, R. (1948). A new readability yardstick. "
        "Journal of Applied Psychology, 32(3), 221."
    ),
    "kincaid_1975": (
        "Kincaid, J. P., Fishburne, R. P., Rogers, R. L. and Chissom, B. S. (1975). "
        "Derivation of new readability formulas for Navy enlisted personnel. "
        "Research Branch Report 8-75."
    ),
    "gunning_1952": (
        "Gunning, R. (1952). The Technique of Clear Writing. "
        "McGraw-Hill."
    ),
    "coleman_liau_1975": (
        "Coleman, M. and Liau, T. L. (1975). A computer readability formula designed "
        "for machine scoring. Journal of Applied Psychology, 60(2), 283."
    ),
    "mclaughlin_1969": (
        "McLaughlin, G. H. (1969). SMOG grading: a new readability formula. "
        "Journal of Reading, 12(8), 639-646."
    ),
    "senter_smith_1967": (
        "Senter, R. J. and Smith, E. A. (1967). Automated Readability Index. "
        "AMRL-TR-6620. Wright-Patterson Air Force Base."
    ),
}
"""Academic citations for the readability formulas."""

# ===========================
# Readability Indices Metadata
# ===========================

STANDARD_READABILITY_INDICES: Final[tuple[str, ...]] = (
    "flesch_kincaid_reading_ease",
    "flesch_kincaid_grade_level",
    "gunning_fog_score",
    "coleman_liau_index",
    "smog_index",
    "automated_readability_index",
)
"""Standard readability indices computed by the analyzer."""

READABILITY_INDEX_DESCRIPTIONS: Final[dict[str, str]] = {
    "flesch_kincaid_reading_ease": (
        "Reading ease score (0-100). Higher = easier to read. "
        "Formula: 206.835 - 1.015 × (words/sentences) - 84.6 × (syllables/words)."
    ),
    "flesch_kincaid_grade_level": (
        "U.S. school grade level based on sentence length and syllables per word. "
        "Formula: 0.39 × (words/sentences) + 11.8 × (syllables/words) - 15.59."
    ),
    "gunning_fog_score": (
        "U.S. grade level based on sentence length and complex words (3+ syllables). "
        "Formula: 0.4 × [(words/sentences) + 100 × (complex_words/words)]. "
        "Capitalized words are not counted as complex."
    ),
    "coleman_liau_index": (
        "Coleman-Liau Index. Based on letters rather than syllables. "
        "Formula: 5.89 × (letters/words) - 0.3 × (sentences/words) - 15.8."
    ),
    "smog_index": (
        "Simple Measure of Gobbledygook. Estimates years of education needed. "
        "Formula: 1.043 × sqrt(complex_words × (30/sentences) + 3.1291)."
    ),
    "automated_readability_index": (
        "Automated Readability Index (ARI). "
        "Formula: 4.71 × (letters/words) + 0.5 × (words/sentences) - 21.43."
    ),
}
"""Descriptions and formulas for each readability index."""

# ===========================
# Formula Coefficients
# ===========================

READING_EASE_BASE: Final[float] = 206.835
READING_EASE_SENTENCE_WEIGHT: Final[float] = 1.015
READING_EASE_SYLLABLE_WEIGHT: Final[float] = 84.6

GRADE_LEVEL_SENTENCE_WEIGHT: Final[float] = 0.39
GRADE_LEVEL_SYLLABLE_WEIGHT: Final[float] = 11.8
GRADE_LEVEL_OFFSET: Final[float] = 15.59

GUNNING_FOG_WEIGHT: Final[float] = 0.4

COLEMAN_LIAU_LETTER_WEIGHT: Final[float] = 5.89
COLEMAN_LIAU_SENTENCE_WEIGHT: Final[float] = 0.3
COLEMAN_LIAU_OFFSET: Final[float] = 15.8

SMOG_WEIGHT: Final[float] = 1.043
SMOG_SAMPLE_SENTENCES: Final[float] = 30.0
SMOG_OFFSET: Final[float] = 3.1291

ARI_LETTER_WEIGHT: Final[float] = 4.71
ARI_SENTENCE_WEIGHT: Final[float] = 0.5
ARI_OFFSET: Final[float] = 21.43

COMPLEX_WORD_SYLLABLES: Final[int] = 3
"""Words with at least this many syllables count as complex (Fog, SMOG)."""

DEFAULT_SCORE_PRECISION: Final[int] = 1
"""Decimal places used when rounding formula results."""

# ===========================
# Timing
# ===========================

SECONDS_PER_MINUTE: Final[int] = 60

DEFAULT_READING_WORDS_PER_MINUTE: Final[int] = 225
"""Average silent reading speed (readability-score.com)."""

DEFAULT_SPEAKING_WORDS_PER_MINUTE: Final[int] = 125
"""Average speaking speed (readability-score.com)."""

# ===========================
# Normalization
# ===========================

FULL_STOP_TAGS: Final[tuple[str, ...]] = (
    "li", "p", "h1", "h2", "h3", "h4", "h5", "h6", "dd",
)
"""Block-level tags whose closing tag marks a sentence boundary."""

CANONICAL_TERMINATOR: Final[str] = "."

# ===========================
# Syllable Estimation
# ===========================

SYLLABLE_EXCEPTIONS: Final[dict[str, int]] = {
    "abalone": 4,
    "abare": 3,
    "abed": 2,
    "abruzzese": 4,
    "abbruzzese": 4,
    "aborigine": 5,
    "acreage": 3,
    "adame": 3,
    "adieu": 2,
    "adobe": 3,
    "anemone": 4,
    "apache": 3,
    "aphrodite": 4,
    "apostrophe": 4,
    "ariadne": 4,
    "cafe": 2,
    "calliope": 4,
    "catastrophe": 4,
    "chile": 2,
    "chloe": 2,
    "circe": 2,
    "coyote": 3,
    "epitome": 4,
    "forever": 3,
    "gethsemane": 4,
    "guacamole": 4,
    "hyperbole": 4,
    "jesse": 2,
    "jukebox": 2,
    "karate": 3,
    "machete": 3,
    "maybe": 2,
    "people": 2,
    "recipe": 3,
    "sesame": 3,
    "shoreline": 2,
    "simile": 3,
    "syncope": 3,
    "tamale": 3,
    "yosemite": 4,
    "daphne": 2,
    "eurydice": 4,
    "euterpe": 3,
    "hermione": 4,
    "penelope": 4,
    "persephone": 4,
    "phoebe": 2,
    "zoe": 2,
}
"""Irregular words whose syllable count the pattern rules get wrong."""

PREFIX_SUFFIX_PATTERNS: Final[tuple[re.Pattern, ...]] = tuple(
    re.compile(pattern) for pattern in (
        r"^un",
        r"^fore",
        r"ly$",
        r"less$",
        r"ful$",
        r"ers?$",
        r"ings?$",
    )
)
"""Single-syllable prefixes and suffixes, stripped in order before counting."""

SUBTRACT_SYLLABLE_PATTERNS: Final[tuple[re.Pattern, ...]] = tuple(
    re.compile(pattern) for pattern in (
        r"cia(l|$)",  # glacial, acacia
        r"tia",
        r"cius",
        r"cious",
        r"[^aeiou]giu",
        r"[aeiouy][^aeiouy]ion",
        r"iou",
        r"sia$",
        r"eous$",
        r"[oa]gue$",
        r".[^aeiuoycgltdb]{2,}ed$",
        r".ely$",
        r"^jua",
        r"uai",
        r"eau",
        r"[aeiouy](b|c|ch|d|dg|f|g|gh|gn|k|l|ll|lv|m|mm|n|nc|ng|nn|p|r|rc|rn|rs|rv|s|sc|sk|sl|squ|ss|st|t|th|v|y|z)e$",
        r"[aeiouy](b|c|ch|dg|f|g|gh|gn|k|l|lch|ll|lv|m|mm|n|nc|ng|nch|nn|p|r|rc|rn|rs|rv|s|sc|sk|sl|squ|ss|th|v|y|z)ed$",
        r"[aeiouy](b|ch|d|f|gh|gn|k|l|lch|ll|lv|m|mm|n|nch|nn|p|r|rn|rs|rv|s|sc|sk|sl|squ|ss|st|t|th|v|y)es$",
        r"^busi$",
    )
)
"""Vowel groups counted as two syllables that should be one."""

ADD_SYLLABLE_PATTERNS: Final[tuple[re.Pattern, ...]] = tuple(
    re.compile(pattern) for pattern in (
        r"ia",
        r"riet",
        r"dien",
        r"iu",
        r"io",
        r"ii",
        r"[aeiouym]bl$",
        r"[aeiou]{3}",
        r"^mc",
        r"ism$",
        r"([^aeiouy])\1l$",
        r"[^l]lien",
        r"^coa[dglx].",
        r"[^gq]ua[^auieo]",
        r"dnt$",
        r"uity$",
        r"ie(r|st)$",
    )
)
"""Vowel groups counted as one syllable that should be two."""

# ===========================
# Output
# ===========================

OUTPUT_HEADER: Final[tuple[str, ...]] = (
    "LetterCount",
    "WordCount",
    "AverageSyllablesPerWord",
    "SentenceCount",
    "AverageWordsPerSentence",
    "ReadingTime",
    "SpeakingTime",
    "FleschKincaidReadingEase",
    "FleschKincaidGradeLevel",
    "GunningFogScore",
    "ColemanLiauIndex",
    "SMOGIndex",
    "AutomatedReadabilityIndex",
)
"""Column order for tabular (row) output."""

# ===========================
# Benchmarks
# ===========================

READING_EASE_BANDS: Final[tuple[tuple[float, str], ...]] = (
    (90.0, "Very easy"),
    (80.0, "Easy"),
    (70.0, "Fairly easy"),
    (60.0, "Standard"),
    (50.0, "Fairly difficult"),
    (30.0, "Difficult"),
)
"""Lower bounds of the Flesch reading-ease bands, highest first."""

VERY_DIFFICULT_BAND: Final[str] = "Very difficult"
"""Band for reading-ease scores below every bound in READING_EASE_BANDS."""

# ===========================
# Validation Constants
# ===========================

MIN_WORD_COUNT_FOR_ANALYSIS: Final[int] = 30
"""Minimum word count for meaningful readability analysis."""

MIN_SENTENCE_COUNT_FOR_ANALYSIS: Final[int] = 3
"""Minimum sentence count for meaningful readability analysis."""
