# tests/unit/test_config.py
"""Tests for YAML configuration loading."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from planwright.config import PlanwrightConfig, load_config


class TestLoadConfig:
    def test_creates_default_file(self, tmp_path: Path):
        """A missing config file is written with the defaults."""
        path = tmp_path / "nested" / "config.yaml"

        config = load_config(path)

        assert config == PlanwrightConfig()
        assert path.exists()
        written = yaml.safe_load(path.read_text())
        assert written["synthesis"]["sprint_capacity"] == 20
        assert written["defaults"]["viewpoint"] == "auto"

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path) == PlanwrightConfig()
        assert path.read_text() == ""

    def test_partial_file_with_unknown_keys(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "defaults:\n"
            "  viewpoint: qa\n"
            "quality:\n"
            "  pass_threshold: 0.7\n"
            "legacy_option: true\n"
        )

        config = load_config(path)

        assert config.defaults.viewpoint == "qa"
        assert config.defaults.strategy == "systematic"
        assert config.quality.pass_threshold == 0.7
        assert config.extraction.features == 10

    def test_invalid_values_rejected(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("output:\n  format: pdf\n")

        with pytest.raises(ValidationError):
            load_config(path)

    def test_non_mapping_rejected(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("- viewpoint\n- qa\n")

        with pytest.raises(ValueError, match="expected a mapping"):
            load_config(path)


class TestDefaults:
    def test_extraction_limits(self):
        limits = PlanwrightConfig().extraction
        assert limits.features == 10
        assert limits.components == 15
        assert limits.integrations == 10

    def test_quality_thresholds(self):
        quality = PlanwrightConfig().quality
        assert quality.pass_threshold == 0.8
        assert quality.blocker_threshold == 0.5
