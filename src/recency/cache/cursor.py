"""Bidirectional read-only cursors over a recency cache."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from recency.cache.lru import RecencyCache

T = TypeVar("T")

# Sentinel slot: no neighbor / no node.
NIL = -1


def project_key(node: Any) -> Any:
    return node.key


def project_value(node: Any) -> Any:
    return node.value


def project_item(node: Any) -> tuple[Any, Any]:
    return node.key, node.value


class RecencyCursor(Generic[T]):
    """Walks a cache from most to least recently used, in either direction.

    The cursor sits between two nodes: ``next()`` returns the node after the
    gap and moves forward, ``previous()`` returns the node before it and moves
    back. Reading never changes the cache's order.

    If the cache is modified (including a promoting ``get``) the cursor raises
    ``RuntimeError`` until ``start()`` or ``end()`` repositions it.
    """

    def __init__(self, cache: RecencyCache[Any, Any], project: Callable[[Any], T]) -> None:
        self._cache = cache
        self._project = project
        self._following = NIL
        self._preceding = NIL
        self._version = 0
        self.start()

    def start(self) -> None:
        """Move before the most recently used entry."""
        self._following = self._cache._head
        self._preceding = NIL
        self._version = self._cache._version

    def end(self) -> None:
        """Move past the least recently used entry."""
        self._following = NIL
        self._preceding = self._cache._tail
        self._version = self._cache._version

    def has_next(self) -> bool:
        self._check()
        return self._following != NIL

    def has_previous(self) -> bool:
        self._check()
        return self._preceding != NIL

    def next(self) -> T:
        """Return the next (less recent) element; ``StopIteration`` at the end."""
        if not self.has_next():
            raise StopIteration
        node = self._cache._node(self._following)
        self._preceding = self._following
        self._following = node.less_recent
        return self._project(node)

    def previous(self) -> T:
        """Return the previous (more recent) element; ``StopIteration`` at the start."""
        if not self.has_previous():
            raise StopIteration
        node = self._cache._node(self._preceding)
        self._following = self._preceding
        self._preceding = node.more_recent
        return self._project(node)

    def __iter__(self) -> RecencyCursor[T]:
        return self

    def __next__(self) -> T:
        return self.next()

    def _check(self) -> None:
        if self._version != self._cache._version:
            raise RuntimeError(
                "RecencyCache changed during iteration; call start() or end() to reposition"
            )
