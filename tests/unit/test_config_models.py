"""Tests for dashboard configuration loading."""

from config.config import HISTOGRAM_IDS, BINS_DEFAULT, DATASET_DEFAULT
from config.models import AppConfig
from utils.io import maybe_load_yaml


def test_app_config_defaults():
    config = AppConfig()

    assert config.histogram_ids == HISTOGRAM_IDS
    assert config.bins_default == BINS_DEFAULT
    assert config.dataset_default == DATASET_DEFAULT
    assert config.log_level == "INFO"


def test_app_config_yaml_override(temp_data_dir):
    yaml_path = temp_data_dir / "dashboard.yaml"
    yaml_path.write_text(
        """
dashboard:
  page_title: Custom Title
  histogram_ids: [left, middle, right]
  bins_default: 40
  dataset_default: sales
""",
        encoding="utf-8",
    )

    config = AppConfig.from_yaml(yaml_path)

    assert config.page_title == "Custom Title"
    assert config.histogram_ids == ("left", "middle", "right")
    assert config.bins_default == 40
    assert config.dataset_default == "sales"
    assert config.sample_size_default == AppConfig().sample_size_default


def test_app_config_invalid_yaml(temp_data_dir):
    yaml_path = temp_data_dir / "broken.yaml"
    yaml_path.write_text("invalid: yaml: content: [", encoding="utf-8")

    config = AppConfig.from_yaml(yaml_path)

    assert config == AppConfig()


def test_app_config_missing_section(temp_data_dir):
    yaml_path = temp_data_dir / "other.yaml"
    yaml_path.write_text("runtime:\n  delta_hours: 3\n", encoding="utf-8")

    assert AppConfig.from_yaml(yaml_path) == AppConfig()


def test_maybe_load_yaml_missing_file(temp_data_dir):
    assert maybe_load_yaml(None) == {}
    assert maybe_load_yaml(str(temp_data_dir / "nope.yaml")) == {}
