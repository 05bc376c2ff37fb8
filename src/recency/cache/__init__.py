"""Recency cache subsystem: LRU cache, cursors, statistics and memoization."""

from recency.cache.cursor import RecencyCursor
from recency.cache.lru import RecencyCache
from recency.cache.memo import memoize
from recency.cache.stats import CacheStats

__all__ = [
    "CacheStats",
    "RecencyCache",
    "RecencyCursor",
    "memoize",
]
