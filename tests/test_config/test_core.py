"""Tests for building caches from configuration."""

import pytest

from recency.config.schema import CacheConfig
from recency.core import build_cache, create_cache, resolve_config
from recency.errors.exceptions import ConfigError
from recency.hashing.hashers import djb
from recency.hashing.keys import identity_hasher
from recency.types import HasherName


class TestCreateCache:
    def test_defaults(self):
        cache = create_cache()
        assert cache.capacity == 128
        assert cache.hasher is identity_hasher

    def test_explicit_arguments(self):
        cache = create_cache(capacity=3, hasher="djb")
        assert cache.capacity == 3
        assert cache.hasher("ab") == djb(b"ab")

    def test_env_configures(self, monkeypatch):
        monkeypatch.setenv("RECENCY_CAPACITY", "5")
        assert create_cache().capacity == 5

    def test_project_file_configures(self, isolated_config):
        (isolated_config / "recency.yaml").write_text("cache:\n  capacity: 6\n")
        assert create_cache().capacity == 6

    def test_invalid_capacity(self):
        with pytest.raises(ConfigError):
            create_cache(capacity=1)

    def test_invalid_hasher(self, monkeypatch):
        monkeypatch.setenv("RECENCY_HASHER", "crc32")
        with pytest.raises(ConfigError):
            create_cache()


class TestResolveConfig:
    def test_returns_model(self):
        config = resolve_config(capacity=10)
        assert isinstance(config, CacheConfig)
        assert config.capacity == 10


class TestBuildCache:
    def test_uses_config(self):
        cache = build_cache(CacheConfig(capacity=4, hasher=HasherName.XOR))
        cache.put("k", "v")
        assert cache.capacity == 4
        assert cache.get("k") == "v"
