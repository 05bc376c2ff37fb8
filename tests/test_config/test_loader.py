"""Tests for YAML config loading."""

import pytest

from recency.config.loader import load_cache_yaml, load_yaml, validate_config
from recency.errors.exceptions import ConfigError
from recency.types import HasherName


class TestLoadCacheYaml:
    def test_valid(self, tmp_path):
        path = tmp_path / "cache.yaml"
        path.write_text("cache:\n  capacity: 32\n  hasher: djb\n")
        config = load_cache_yaml(path)
        assert config.capacity == 32
        assert config.hasher is HasherName.DJB

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_cache_yaml(tmp_path / "nope.yaml")

    def test_missing_cache_key(self, tmp_path):
        path = tmp_path / "cache.yaml"
        path.write_text("capacity: 32\n")
        with pytest.raises(ConfigError, match="cache"):
            load_cache_yaml(path)

    def test_capacity_too_small(self, tmp_path):
        path = tmp_path / "cache.yaml"
        path.write_text("cache:\n  capacity: 1\n")
        with pytest.raises(ConfigError) as exc:
            load_cache_yaml(path)
        assert exc.value.source == str(path)

    def test_unknown_hasher(self, tmp_path):
        path = tmp_path / "cache.yaml"
        path.write_text("cache:\n  hasher: sha1\n")
        with pytest.raises(ConfigError):
            load_cache_yaml(path)


class TestLoadYaml:
    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_yaml(path)


class TestValidateConfig:
    def test_defaults(self):
        config = validate_config({})
        assert config.capacity == 128
        assert config.hasher is HasherName.IDENTITY

    def test_ignores_unknown_keys(self):
        assert validate_config({"capacity": 4, "colour": "blue"}).capacity == 4

    def test_string_capacity_coerced(self):
        assert validate_config({"capacity": "16"}).capacity == 16
