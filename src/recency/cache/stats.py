"""Cache statistics model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CacheStats(BaseModel):
    """Point-in-time counters for a recency cache."""

    entries: int = 0
    capacity: int = Field(default=0, ge=0)
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    @property
    def fill_ratio(self) -> float:
        return self.entries / self.capacity if self.capacity > 0 else 0.0
