"""Tests for brand_canon/common/config_loader.py"""

import pytest

from brand_canon.common.config_loader import load_config, load_priority_config
from brand_canon.models import PriorityConfig


class TestLoadPriorityConfigFromFile:
    def test_custom_rules_file(self, tmp_path):
        rules = tmp_path / "rules.yaml"
        rules.write_text(
            "front_only: [Rich]\n"
            "ignored: [bio]\n"
            "normalization:\n"
            "  pattern: Babē\n"
            "  replacement: Babe\n",
            encoding="utf-8",
        )
        config = load_priority_config(rules)
        assert config.front_only == frozenset({"rich"})
        assert config.ignored == frozenset({"bio"})
        assert config.front_or_second == frozenset()
        assert config.normalize_pattern == "Babē"

    def test_empty_rules_file(self, tmp_path):
        rules = tmp_path / "rules.yaml"
        rules.write_text("", encoding="utf-8")
        assert load_priority_config(rules) == PriorityConfig()

    def test_missing_rules_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_priority_config(tmp_path / "missing.yaml")

    def test_unknown_section(self, tmp_path):
        rules = tmp_path / "rules.yaml"
        rules.write_text("front_onyl: [rich]\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_priority_config(rules)


class TestLoadFromConfigFiles:
    """Tests that load real config YAML files from the repo."""

    def test_load_priority_config(self):
        config = load_priority_config()
        assert "rich" in config.front_only
        assert "heel" in config.front_or_second
        assert "bio" in config.ignored
        assert "happy" in config.case_sensitive

    def test_numeric_brand_kept_as_string(self):
        assert "112" in load_priority_config().front_only

    def test_normalization_rule(self):
        config = load_priority_config()
        assert config.normalize_pattern == "Babē"
        assert config.normalize_replacement == "Babe"

    def test_load_config_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_config("nonexistent_file.yaml")
