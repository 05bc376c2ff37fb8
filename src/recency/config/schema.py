"""Pydantic models for cache configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from recency.config.defaults import DEFAULT_CAPACITY, DEFAULT_LOG_LEVEL
from recency.types import HasherName


class CacheConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    capacity: int = Field(default=DEFAULT_CAPACITY, ge=2)
    hasher: HasherName = HasherName.IDENTITY
    log_level: str = DEFAULT_LOG_LEVEL
