"""
Readability Metrics Configuration Package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from readmetrics/configs/readability.yaml
3. Automatically override with environment variables from .env or the shell

Usage:
    from readmetrics.config import settings

    # Words-per-minute used for reading time
    wpm = settings.readability.timing.reading_words_per_minute

    # Batch parallelism
    workers = settings.readability.processing.max_workers
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from readmetrics.config._loader import load_yaml_section, clear_config_cache
from readmetrics.config.readability import (
    ReadabilityConfig,
    ReadabilityTimingConfig,
    ReadabilityScoringConfig,
    ReadabilityProcessingConfig,
    ReadabilityOutputConfig,
)


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from readmetrics.config import settings

        settings.readability.timing.speaking_words_per_minute
        settings.readability.scoring.precision
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    readability: ReadabilityConfig = Field(default_factory=ReadabilityConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


__all__ = [
    "settings",
    "Settings",
    "load_yaml_section",
    "clear_config_cache",
    "ReadabilityConfig",
    "ReadabilityTimingConfig",
    "ReadabilityScoringConfig",
    "ReadabilityProcessingConfig",
    "ReadabilityOutputConfig",
]
