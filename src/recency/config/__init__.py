"""Configuration: defaults, YAML files, environment and runtime overrides."""

from recency.config.hierarchy import load_config_hierarchy
from recency.config.loader import load_cache_yaml, load_yaml, validate_config
from recency.config.schema import CacheConfig

__all__ = [
    "CacheConfig",
    "load_cache_yaml",
    "load_config_hierarchy",
    "load_yaml",
    "validate_config",
]
