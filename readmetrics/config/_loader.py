"""
Cached YAML configuration loader.

Default YAML files ship inside the package (readmetrics/configs/) and are
read through importlib.resources, so editable and regular installs resolve
the same files. Set READMETRICS_CONFIG_DIR to read them from another
directory instead.

Usage:
    from readmetrics.config._loader import load_yaml_section

    # Load entire file
    config = load_yaml_section("readability.yaml")

    # Load specific section
    timing = load_yaml_section("readability.yaml", "readability").get("timing", {})
"""

import os
from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any
import yaml

CONFIG_DIR_ENV_VAR = "READMETRICS_CONFIG_DIR"


def _get_configs_dir() -> Traversable:
    """Directory holding the YAML defaults (override, else packaged)."""
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override)
    return resources.files("readmetrics") / "configs"


@lru_cache(maxsize=16)
def load_yaml_section(config_file: str, section: str | None = None) -> dict[str, Any]:
    """
    Load and cache YAML configuration.

    Args:
        config_file: File name inside the configs directory (e.g., "readability.yaml")
        section: Optional top-level key to extract (e.g., "readability")

    Returns:
        Configuration dictionary (empty dict if the file or section is missing)

    Note:
        Results are cached. Use clear_config_cache() after changing
        READMETRICS_CONFIG_DIR or the files themselves.
    """
    config_path = _get_configs_dir() / config_file

    if not config_path.is_file():
        return {}

    data = yaml.safe_load(config_path.read_text(encoding='utf-8')) or {}

    return data.get(section, {}) if section else data


def clear_config_cache() -> None:
    """Clear all cached configurations. Useful for testing."""
    load_yaml_section.cache_clear()
