"""Fixed-capacity LRU cache over a node arena and a hash-table index."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from recency.cache.cursor import NIL, RecencyCursor, project_item, project_key, project_value
from recency.cache.stats import CacheStats
from recency.errors.exceptions import EmptyError, InvalidArgumentError, NotFoundError
from recency.hashing.keys import KeyHasher, identity_hasher
from recency.table.dictionary import HashTable
from recency.types import NodeHandle

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

MINIMUM_CAPACITY = 2


class _Node(Generic[K, V]):
    """Arena cell. Neighbors are slot numbers, ``NIL`` at either end."""

    __slots__ = ("key", "value", "more_recent", "less_recent", "generation")

    def __init__(self) -> None:
        self.key: Any = None
        self.value: Any = None
        self.more_recent = NIL
        self.less_recent = NIL
        self.generation = 0


class RecencyCache(Generic[K, V]):
    """Bounded key/value store that evicts the least-recently-used entry.

    Nodes live in an arena owned by the cache; the index maps each key to a
    ``NodeHandle`` and never owns a node. The recency list runs from ``head``
    (most recent) to ``tail`` (least recent) and always holds exactly the
    nodes the index points at.

    ``get`` promotes the entry it returns. Use ``contains``, ``peek_mru`` or
    ``peek_lru`` to inspect without changing the order.

    Not thread-safe: ``get`` reorders the list and the index may reallocate,
    so concurrent callers must guard the whole cache with one lock.
    """

    def __init__(self, capacity: int, hasher: KeyHasher = identity_hasher) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidArgumentError("Capacity must be an integer.", argument="capacity")
        if capacity < MINIMUM_CAPACITY:
            raise InvalidArgumentError(
                f"Capacity must be at least {MINIMUM_CAPACITY}, got {capacity}.",
                argument="capacity",
            )
        self._capacity = capacity
        self._hasher = hasher
        self._index: HashTable[K, NodeHandle] = HashTable(capacity << 1, hasher)
        self._nodes: list[_Node[K, V]] = []
        self._free: list[int] = []
        self._head = NIL
        self._tail = NIL
        self._version = 0
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    # -- Introspection --------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def hasher(self) -> KeyHasher:
        return self._hasher

    @property
    def size(self) -> int:
        return len(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def is_empty(self) -> bool:
        return self._index.is_empty()

    def contains(self, key: K) -> bool:
        """Membership test. Does not count as a use."""
        return self._index.contains(key)

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def collisions(self) -> int:
        return self._index.collision_bucket_count()

    def max_collision(self) -> int:
        return self._index.max_chain_depth()

    def stats(self) -> CacheStats:
        return CacheStats(
            entries=len(self),
            capacity=self._capacity,
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
        )

    def reset_stats(self) -> None:
        self._hits = self._misses = self._evictions = 0

    # -- Core operations ------------------------------------------------------

    def get(self, key: K) -> V:
        """Return the value for ``key`` and mark it most recently used."""
        if key is None:
            raise InvalidArgumentError("Key cannot be None.", argument="key")
        slot = self._find_slot(key)
        if slot is None:
            raise NotFoundError(f"No cached entry for key {key!r}.", key=key)
        self._promote(slot)
        return self._nodes[slot].value

    def put(self, key: K, value: V) -> None:
        """Store ``value`` under ``key`` as the most recently used entry.

        A key already present is dropped first, so the new pair is treated as
        a fresh insertion. A full cache evicts its least recently used entry.
        """
        if key is None:
            raise InvalidArgumentError("Key cannot be None.", argument="key")
        if value is None:
            raise InvalidArgumentError("Value cannot be None.", argument="value")
        slot = self._find_slot(key)
        if slot is not None:
            self._discard(slot)
        elif len(self) == self._capacity:
            self._evict_for_insert()
        slot = self._allocate(key, value)
        self._link_head(slot)
        self._index.put(key, self._handle(slot))
        self._version += 1

    def remove(self, key: K) -> None:
        if key is None:
            raise InvalidArgumentError("Key cannot be None.", argument="key")
        slot = self._find_slot(key)
        if slot is None:
            raise NotFoundError(f"No cached entry for key {key!r}.", key=key)
        if len(self) == 1:
            self.clear()
            return
        self._discard(slot)

    def evict_mru(self) -> V:
        """Remove and return the most recently used value."""
        if self._head == NIL:
            raise EmptyError("Cache is empty.")
        return self._pop(self._head)

    def evict_lru(self) -> V:
        """Remove and return the least recently used value."""
        if self._tail == NIL:
            raise EmptyError("Cache is empty.")
        return self._pop(self._tail)

    def peek_mru(self) -> V:
        """Most recently used value. Does not count as a use."""
        if self._head == NIL:
            raise EmptyError("Cache is empty.")
        return self._nodes[self._head].value

    def peek_lru(self) -> V:
        """Least recently used value. Does not count as a use."""
        if self._tail == NIL:
            raise EmptyError("Cache is empty.")
        return self._nodes[self._tail].value

    def clear(self) -> None:
        self._index = HashTable(self._capacity << 1, self._hasher)
        self._nodes = []
        self._free = []
        self._head = self._tail = NIL
        self._version += 1

    def try_get(self, key: K, compute: Callable[[], V]) -> V:
        """Return the cached value for ``key``, computing and storing it on a miss.

        ``compute`` runs at most once per call and only when ``key`` is absent.
        It should be deterministic for the key, otherwise memoization is
        meaningless. Either way the entry ends up most recently used.
        """
        if key is None:
            raise InvalidArgumentError("Key cannot be None.", argument="key")
        if self.contains(key):
            self._hits += 1
        else:
            self.put(key, compute())
            self._misses += 1
        return self.get(key)

    def copy(self) -> RecencyCache[K, V]:
        """Return an independent cache with the same entries in the same order."""
        clone: RecencyCache[K, V] = RecencyCache(self._capacity, self._hasher)
        slot = self._tail
        while slot != NIL:
            node = self._nodes[slot]
            clone.put(node.key, node.value)
            slot = node.more_recent
        return clone

    # -- Views ----------------------------------------------------------------

    def keys(self) -> RecencyCursor[K]:
        """Bidirectional cursor over keys, most to least recently used."""
        return RecencyCursor(self, project_key)

    def values(self) -> RecencyCursor[V]:
        """Bidirectional cursor over values, most to least recently used."""
        return RecencyCursor(self, project_value)

    def items(self) -> RecencyCursor[tuple[K, V]]:
        return RecencyCursor(self, project_item)

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    # -- Comparison & rendering -----------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecencyCache):
            return NotImplemented
        if self._capacity != other._capacity or len(self) != len(other):
            return False
        ours, theirs = self._head, other._head
        while ours != NIL and theirs != NIL:
            a, b = self._nodes[ours], other._nodes[theirs]
            if a.key != b.key or a.value != b.value:
                return False
            ours, theirs = a.less_recent, b.less_recent
        return ours == NIL and theirs == NIL

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        parts = [f"'{key}': '{value}'" for key, value in self.items()]
        return "[" + ", ".join(parts) + "]"

    def __repr__(self) -> str:
        return f"RecencyCache(capacity={self._capacity}, size={len(self)})"

    # -- Arena & list internals -----------------------------------------------

    def _node(self, slot: int) -> _Node[K, V]:
        return self._nodes[slot]

    def _handle(self, slot: int) -> NodeHandle:
        return NodeHandle(slot, self._nodes[slot].generation)

    def _find_slot(self, key: K) -> int | None:
        handle = self._index.find(key)
        if handle is None:
            return None
        if self._nodes[handle.slot].generation != handle.generation:
            raise RuntimeError(f"Stale node handle for key {key!r}")
        return handle.slot

    def _allocate(self, key: K, value: V) -> int:
        if self._free:
            slot = self._free.pop()
        else:
            slot = len(self._nodes)
            self._nodes.append(_Node())
        node = self._nodes[slot]
        node.key = key
        node.value = value
        node.more_recent = node.less_recent = NIL
        return slot

    def _release(self, slot: int) -> None:
        node = self._nodes[slot]
        node.key = node.value = None
        node.more_recent = node.less_recent = NIL
        node.generation += 1
        self._free.append(slot)

    def _link_head(self, slot: int) -> None:
        node = self._nodes[slot]
        node.more_recent = NIL
        node.less_recent = self._head
        if self._head == NIL:
            self._tail = slot
        else:
            self._nodes[self._head].more_recent = slot
        self._head = slot

    def _unlink(self, slot: int) -> None:
        node = self._nodes[slot]
        if node.more_recent == NIL:
            self._head = node.less_recent
        else:
            self._nodes[node.more_recent].less_recent = node.less_recent
        if node.less_recent == NIL:
            self._tail = node.more_recent
        else:
            self._nodes[node.less_recent].more_recent = node.more_recent
        node.more_recent = node.less_recent = NIL

    def _promote(self, slot: int) -> None:
        if slot == self._head:
            return
        self._unlink(slot)
        self._link_head(slot)
        self._version += 1

    def _discard(self, slot: int) -> None:
        """Unlink a node, drop it from the index and release its cell."""
        key = self._nodes[slot].key
        self._unlink(slot)
        self._index.remove(key)
        self._release(slot)
        self._version += 1

    def _pop(self, slot: int) -> V:
        value = self._nodes[slot].value
        if len(self) == 1:
            self.clear()
        else:
            self._discard(slot)
        return value

    def _evict_for_insert(self) -> None:
        key = self._nodes[self._tail].key
        self._discard(self._tail)
        self._evictions += 1
        logger.debug("Evicted least recently used key %r (capacity %d)", key, self._capacity)
