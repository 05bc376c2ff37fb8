"""recency: bounded LRU cache over a chained hash table with pluggable hashers."""

from recency.cache import CacheStats, RecencyCache, RecencyCursor, memoize
from recency.core import build_cache, create_cache, resolve_config
from recency.errors import (
    ConfigError,
    EmptyError,
    InvalidArgumentError,
    NotFoundError,
    RecencyError,
)
from recency.hashing import bob_jenkins, byte_hasher, djb, identity_hasher, xor_fold
from recency.table import HashTable
from recency.types import HasherName, NodeHandle

__version__ = "0.1.0"

__all__ = [
    "CacheStats",
    "ConfigError",
    "EmptyError",
    "HashTable",
    "HasherName",
    "InvalidArgumentError",
    "NodeHandle",
    "NotFoundError",
    "RecencyCache",
    "RecencyCursor",
    "RecencyError",
    "bob_jenkins",
    "build_cache",
    "byte_hasher",
    "create_cache",
    "djb",
    "identity_hasher",
    "memoize",
    "resolve_config",
    "xor_fold",
]
