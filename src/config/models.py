"""Configuration models and data structures."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from config.config import (
    CONFIG_YAML_PATH,
    LOG_LEVEL,
    PAGE_TITLE,
    DATASET_DEFAULT,
    SAMPLE_SIZE_DEFAULT,
    RANDOM_SEED,
    HISTOGRAM_IDS,
    BINS_DEFAULT,
)
from utils.io import maybe_load_yaml


@dataclass
class AppConfig:
    """Dashboard configuration with YAML override support."""
    page_title: str = PAGE_TITLE
    log_level: str = LOG_LEVEL
    dataset_default: str = DATASET_DEFAULT
    sample_size_default: int = SAMPLE_SIZE_DEFAULT
    random_seed: int = RANDOM_SEED
    histogram_ids: tuple = HISTOGRAM_IDS
    bins_default: int = BINS_DEFAULT

    @classmethod
    def from_yaml(cls, yaml_path: Optional[Union[str, Path]] = None) -> 'AppConfig':
        """Create config with optional YAML overrides.

        Only the ``dashboard`` section of the file is read. Unknown keys are
        ignored and a missing or unreadable file yields the defaults.
        """
        if yaml_path is None and CONFIG_YAML_PATH.exists():
            yaml_path = CONFIG_YAML_PATH
        yaml_config = maybe_load_yaml(str(yaml_path) if yaml_path else None)

        section = yaml_config.get('dashboard', {}) if isinstance(yaml_config, dict) else {}
        if not isinstance(section, dict):
            section = {}

        return cls(
            page_title=section.get('page_title', PAGE_TITLE),
            log_level=section.get('log_level', LOG_LEVEL),
            dataset_default=section.get('dataset_default', DATASET_DEFAULT),
            sample_size_default=int(section.get('sample_size_default', SAMPLE_SIZE_DEFAULT)),
            random_seed=int(section.get('random_seed', RANDOM_SEED)),
            histogram_ids=tuple(section.get('histogram_ids', HISTOGRAM_IDS)),
            bins_default=int(section.get('bins_default', BINS_DEFAULT)),
        )
