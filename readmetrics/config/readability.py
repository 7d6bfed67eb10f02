"""Readability analysis configuration."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from readmetrics.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("readability.yaml", "readability")


class ReadabilityTimingConfig(BaseSettings):
    """Words-per-minute constants for reading and speaking time estimates."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_TIMING_',
        case_sensitive=False
    )

    reading_words_per_minute: int = Field(
        default_factory=lambda: _get_config().get('timing', {}).get('reading_words_per_minute', 225),
        gt=0
    )
    speaking_words_per_minute: int = Field(
        default_factory=lambda: _get_config().get('timing', {}).get('speaking_words_per_minute', 125),
        gt=0
    )


class ReadabilityScoringConfig(BaseSettings):
    """Formula evaluation settings."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_SCORING_',
        case_sensitive=False
    )

    precision: int = Field(
        default_factory=lambda: _get_config().get('scoring', {}).get('precision', 1),
        ge=0
    )


class ReadabilityProcessingConfig(BaseSettings):
    """Batch processing settings for readability."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_PROC_',
        case_sensitive=False
    )

    max_workers: int = Field(
        default_factory=lambda: _get_config().get('processing', {}).get('max_workers', 1),
        ge=1
    )
    max_tasks_per_child: int = Field(
        default_factory=lambda: _get_config().get('processing', {}).get('max_tasks_per_child', 50),
        ge=1
    )


class ReadabilityOutputConfig(BaseSettings):
    """Output format settings for readability results."""
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_OUT_',
        case_sensitive=False
    )

    format: Literal["json", "csv", "text"] = Field(
        default_factory=lambda: _get_config().get('output', {}).get('format', 'json')
    )


class ReadabilityConfig(BaseSettings):
    """
    Readability analysis configuration.
    Loads from readmetrics/configs/readability.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='READABILITY_',
        env_nested_delimiter='__',
        case_sensitive=False
    )

    timing: ReadabilityTimingConfig = Field(
        default_factory=ReadabilityTimingConfig
    )
    scoring: ReadabilityScoringConfig = Field(
        default_factory=ReadabilityScoringConfig
    )
    processing: ReadabilityProcessingConfig = Field(
        default_factory=ReadabilityProcessingConfig
    )
    output: ReadabilityOutputConfig = Field(
        default_factory=ReadabilityOutputConfig
    )

    @property
    def precision(self) -> int:
        """Shortcut for scoring precision."""
        return self.scoring.precision
