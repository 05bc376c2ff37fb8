"""Memoization on top of ``RecencyCache.try_get``."""

from __future__ import annotations

import functools
from collections.abc import Callable, Hashable
from typing import Any, TypeVar

from recency.cache.lru import RecencyCache

R = TypeVar("R")

KeyBuilder = Callable[..., Hashable]

_KWARGS_MARK = object()


def default_key(*args: Any, **kwargs: Any) -> Hashable:
    """Positional arguments, a separator, then sorted keyword items."""
    if not kwargs:
        return args
    return (*args, _KWARGS_MARK, *sorted(kwargs.items()))


def memoize(
    cache: RecencyCache[Any, Any],
    key: KeyBuilder | None = None,
) -> Callable[[Callable[..., R]], Callable[..., R]]:
    """Cache a function's results in ``cache``.

    The wrapped function must be deterministic for its arguments and must not
    return ``None``; the cache rejects ``None`` values.
    """
    build_key = key or default_key

    def decorator(func: Callable[..., R]) -> Callable[..., R]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> R:
            return cache.try_get(build_key(*args, **kwargs), lambda: func(*args, **kwargs))

        wrapper.cache = cache  # type: ignore[attr-defined]
        return wrapper

    return decorator
