"""Public entry point: build caches from the configuration hierarchy."""

from __future__ import annotations

import logging
from typing import Any

from recency.cache.lru import RecencyCache
from recency.config.hierarchy import load_config_hierarchy
from recency.config.loader import validate_config
from recency.config.schema import CacheConfig
from recency.hashing.keys import resolve_hasher

logger = logging.getLogger(__name__)


def resolve_config(
    capacity: int | None = None,
    hasher: str | None = None,
    **overrides: Any,
) -> CacheConfig:
    """Merge defaults, config files, environment and arguments, then validate."""
    merged = load_config_hierarchy(capacity=capacity, hasher=hasher, **overrides)
    return validate_config(merged)


def build_cache(config: CacheConfig) -> RecencyCache[Any, Any]:
    logger.debug("Building cache: capacity=%d hasher=%s", config.capacity, config.hasher.value)
    return RecencyCache(config.capacity, resolve_hasher(config.hasher))


def create_cache(
    capacity: int | None = None,
    hasher: str | None = None,
    **overrides: Any,
) -> RecencyCache[Any, Any]:
    """Create a cache; explicit arguments win over configuration files and env vars.

    Usage::

        from recency import create_cache

        cache = create_cache(capacity=256, hasher="djb")
        cache.put("answer", 42)
    """
    return build_cache(resolve_config(capacity=capacity, hasher=hasher, **overrides))
