"""Custom exception hierarchy for recency."""

from __future__ import annotations

from typing import Any


class RecencyError(Exception):
    """Base exception for all recency errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(RecencyError):
    """An operation received an argument it cannot accept.

    Examples: ``None`` key or value, cache capacity below 2.
    """

    def __init__(self, message: str = "", argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class NotFoundError(RecencyError):
    """Lookup or removal of a key that is not stored."""

    def __init__(self, message: str = "", key: Any = None) -> None:
        super().__init__(message)
        self.key = key


class EmptyError(RecencyError):
    """MRU/LRU access on a cache holding no entries."""


class ConfigError(RecencyError):
    """Configuration file or values are invalid."""

    def __init__(self, message: str = "", source: str | None = None) -> None:
        super().__init__(message)
        self.source = source
