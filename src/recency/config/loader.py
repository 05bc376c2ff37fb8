"""YAML config loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from recency.config.schema import CacheConfig
from recency.errors.exceptions import ConfigError


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load any YAML file safely."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ConfigError(
            f"Expected YAML mapping, got {type(raw).__name__} in {path}", source=str(path)
        )

    return raw


def load_cache_yaml(path: str | Path) -> CacheConfig:
    """Load a cache YAML file and return a validated CacheConfig."""
    raw = load_yaml(path)
    section = raw.get("cache")
    if not isinstance(section, dict):
        raise ConfigError(
            f"Invalid cache YAML: missing top-level 'cache' mapping in {path}", source=str(path)
        )
    return validate_config(section, source=str(path))


def validate_config(values: dict[str, Any], source: str | None = None) -> CacheConfig:
    """Validate a flat config mapping, raising ConfigError on bad values."""
    try:
        return CacheConfig(**values)
    except ValidationError as e:
        where = f" in {source}" if source else ""
        raise ConfigError(f"Invalid cache configuration{where}: {e}", source=source) from e
