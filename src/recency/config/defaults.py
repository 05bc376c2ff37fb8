"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Default cache settings
DEFAULT_CAPACITY = 128
DEFAULT_HASHER = "identity"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "capacity": DEFAULT_CAPACITY,
        "hasher": DEFAULT_HASHER,
        "log_level": DEFAULT_LOG_LEVEL,
    }
