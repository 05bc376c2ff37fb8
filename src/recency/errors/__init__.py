"""Error handling: typed exceptions raised by the table and the cache."""

from recency.errors.exceptions import (
    ConfigError,
    EmptyError,
    InvalidArgumentError,
    NotFoundError,
    RecencyError,
)

__all__ = [
    "RecencyError",
    "InvalidArgumentError",
    "NotFoundError",
    "EmptyError",
    "ConfigError",
]
