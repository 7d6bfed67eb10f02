"""
Data structures for readability analysis.

This module defines Pydantic v2 models for readability results.
These schemas enforce type safety and validation throughout the pipeline.

Following the project's Pydantic v2 conventions:
- Use BaseModel (not dataclass)
- Use @field_validator / @model_validator (not @validator)
- Use model_config = (not class Config:)
- Use .model_dump() (not .dict())
- Use .model_dump_json() (not .json())
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Dict, List, Optional
from datetime import datetime

from .constants import (
    OUTPUT_HEADER,
    READABILITY_MODULE_VERSION,
    READING_EASE_BANDS,
    VERY_DIFFICULT_BAND,
)

# Fields left unset on the empty variant
_METRIC_FIELDS = (
    "average_syllables_per_word",
    "sentence_count",
    "average_words_per_sentence",
    "reading_time_seconds",
    "speaking_time_seconds",
    "flesch_kincaid_reading_ease",
    "flesch_kincaid_grade_level",
    "gunning_fog_score",
    "coleman_liau_index",
    "smog_index",
    "automated_readability_index",
)


class SyllableStatistics(BaseModel):
    """Syllable aggregates over every token of a canonical text."""
    model_config = ConfigDict(frozen=True)

    total: int = Field(..., ge=0, description="Sum of syllables over all tokens")
    three_or_more: int = Field(
        ...,
        ge=0,
        description="Tokens with 3+ syllables"
    )
    three_or_more_excluding_capitalized: int = Field(
        ...,
        ge=0,
        description="Tokens with 3+ syllables, skipping tokens that start with an "
                    "uppercase letter (proper-noun proxy for Gunning Fog)"
    )


class ReadabilityResult(BaseModel):
    """
    Readability statistics for one text unit.

    This is the main data structure returned by ``analyze``. It is immutable
    and carries no identity beyond its values.

    A text without any ASCII letters produces the *empty* variant: letter and
    word counts are 0, every other metric is None, and ``clean_text`` still
    holds the canonical text. Use ``is_empty`` to tell the variants apart.
    """
    model_config = ConfigDict(frozen=True)

    # ===========================
    # Basic Text Statistics
    # ===========================
    letter_count: int = Field(..., ge=0, description="ASCII letters in the canonical text")
    word_count: int = Field(..., ge=0, description="Space-delimited tokens (0 for empty text)")
    average_syllables_per_word: Optional[float] = Field(default=None, ge=0.0)
    sentence_count: Optional[int] = Field(default=None, ge=1)
    average_words_per_sentence: Optional[float] = Field(default=None, ge=0.0)

    # ===========================
    # Timing
    # ===========================
    reading_time_seconds: Optional[int] = Field(
        default=None,
        ge=0,
        description="Estimated silent reading time (225 wpm by default)"
    )
    speaking_time_seconds: Optional[int] = Field(
        default=None,
        ge=0,
        description="Estimated speaking time (125 wpm by default)"
    )

    # ===========================
    # Standard Readability Indices
    # ===========================
    flesch_kincaid_reading_ease: Optional[float] = Field(
        default=None,
        description="Flesch Reading Ease. Higher = easier to read. Can fall outside 0-100."
    )
    flesch_kincaid_grade_level: Optional[float] = Field(
        default=None,
        description="Flesch-Kincaid Grade Level (U.S. school grade)."
    )
    gunning_fog_score: Optional[float] = Field(
        default=None,
        description="Gunning Fog Index (U.S. grade level), capitalized words not complex."
    )
    coleman_liau_index: Optional[float] = Field(
        default=None,
        description="Coleman-Liau Index (U.S. grade level) based on letters per word."
    )
    smog_index: Optional[float] = Field(
        default=None,
        description="SMOG Index. Estimated years of education needed."
    )
    automated_readability_index: Optional[float] = Field(
        default=None,
        description="Automated Readability Index (U.S. grade level)."
    )

    clean_text: str = Field(..., description="Canonical text the statistics were computed from")

    # ===========================
    # Validators
    # ===========================

    @model_validator(mode='after')
    def validate_variant(self) -> 'ReadabilityResult':
        """Texts with letters must carry every metric."""
        if self.letter_count > 0:
            missing = [
                name for name in _METRIC_FIELDS
                if getattr(self, name) is None
            ]
            if missing:
                raise ValueError(
                    f"Metrics missing for non-empty text: {', '.join(missing)}"
                )
        return self

    # ===========================
    # Constructors
    # ===========================

    @classmethod
    def empty(cls, clean_text: str) -> 'ReadabilityResult':
        """Result for a text without letters: counts zeroed, metrics unset."""
        return cls(letter_count=0, word_count=0, clean_text=clean_text)

    # ===========================
    # Methods
    # ===========================

    @property
    def is_empty(self) -> bool:
        """True when the text had no letters and no formula was evaluated."""
        return self.letter_count == 0

    def to_row(self) -> List[str]:
        """
        Render the result as one tabular row in OUTPUT_HEADER order.

        Unset metrics of the empty variant render as empty strings.
        """
        values = (
            self.letter_count,
            self.word_count,
            self.average_syllables_per_word,
            self.sentence_count,
            self.average_words_per_sentence,
            self.reading_time_seconds,
            self.speaking_time_seconds,
            self.flesch_kincaid_reading_ease,
            self.flesch_kincaid_grade_level,
            self.gunning_fog_score,
            self.coleman_liau_index,
            self.smog_index,
            self.automated_readability_index,
        )
        return ["" if value is None else str(value) for value in values]

    def to_record(self) -> Dict[str, str]:
        """Row keyed by OUTPUT_HEADER column names."""
        return dict(zip(OUTPUT_HEADER, self.to_row()))

    def interpret_reading_ease(self) -> Optional[str]:
        """
        Get human-readable interpretation of the Flesch reading ease score.

        Returns:
            Band name (e.g., "Standard", "Difficult"), or None for empty text
        """
        score = self.flesch_kincaid_reading_ease
        if score is None:
            return None
        for lower_bound, band in READING_EASE_BANDS:
            if score >= lower_bound:
                return band
        return VERY_DIFFICULT_BAND

    def get_summary(self) -> str:
        """Return human-readable summary of readability statistics."""
        if self.is_empty:
            return (
                f"Readability Analysis Summary\n"
                f"{'='*50}\n"
                f"No letters found - no statistics computed"
            )
        return (
            f"Readability Analysis Summary\n"
            f"{'='*50}\n"
            f"Letters: {self.letter_count:,} | Words: {self.word_count:,} | "
            f"Sentences: {self.sentence_count}\n"
            f"Reading time: {self.reading_time_seconds}s | "
            f"Speaking time: {self.speaking_time_seconds}s\n"
            f"\nStandard Indices:\n"
            f"  Flesch Reading Ease: {self.flesch_kincaid_reading_ease} "
            f"({self.interpret_reading_ease()})\n"
            f"  Flesch-Kincaid Grade: {self.flesch_kincaid_grade_level}\n"
            f"  Gunning Fog: {self.gunning_fog_score}\n"
            f"  Coleman-Liau: {self.coleman_liau_index}\n"
            f"  SMOG: {self.smog_index}\n"
            f"  ARI: {self.automated_readability_index}"
        )


class ReadabilityAnalysisMetadata(BaseModel):
    """
    Metadata about a readability analysis run.

    Tracks configuration, execution details, and warnings for auditability.
    """
    version: str = Field(default=READABILITY_MODULE_VERSION)
    analyzed_at: datetime = Field(default_factory=datetime.now)
    text_length: int = Field(..., ge=0, description="Length of the canonical text")
    warnings: list[str] = Field(
        default_factory=list,
        description="Analysis warnings (e.g., text too short)"
    )
    config_used: Dict = Field(
        default_factory=dict,
        description="Configuration settings used for this analysis"
    )


class ReadabilityAnalysisResult(BaseModel):
    """
    Readability result together with the metadata of the run that produced it.

    Returned by ReadabilityAnalyzer.analyze(text, return_metadata=True).
    """
    result: ReadabilityResult = Field(..., description="Readability statistics")
    metadata: ReadabilityAnalysisMetadata = Field(
        ...,
        description="Analysis metadata and configuration"
    )


class BatchItem(BaseModel):
    """One text unit in a batch, tagged with a caller-assigned identifier."""
    model_config = ConfigDict(frozen=True)

    identifier: str
    text: str


class BatchResult(BaseModel):
    """Result for one batch item, carrying the caller's identifier."""
    model_config = ConfigDict(frozen=True)

    identifier: str
    result: ReadabilityResult
