"""Chained hash table over a power-of-two bucket array."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from recency.errors.exceptions import InvalidArgumentError, NotFoundError
from recency.hashing.keys import KeyHasher, identity_hasher

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

MAXIMUM_LOAD = 0.72
MINIMUM_CAPACITY = 64


class _Entry(Generic[K, V]):
    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value


_Bucket = list[_Entry[K, V]]


class HashTable(Generic[K, V]):
    """Maps unique keys to values using chained buckets.

    The bucket array length is always a power of two, so a key's slot is
    ``hasher(key) & (len - 1)``. After every completed insert the load factor
    is at most ``MAXIMUM_LOAD``; when an insert pushes it past that, the array
    doubles and every entry is relocated with the same hasher.

    Iteration order is unspecified. Mutating the table while iterating raises
    ``RuntimeError`` on the iterator's next step.
    """

    def __init__(
        self,
        capacity: int = MINIMUM_CAPACITY,
        hasher: KeyHasher = identity_hasher,
    ) -> None:
        self._hasher = hasher
        self._buckets: list[_Bucket | None] = [None] * _bucket_count(capacity)
        self._count = 0
        self._version = 0

    @property
    def hasher(self) -> KeyHasher:
        return self._hasher

    @property
    def capacity(self) -> int:
        """Number of slots in the bucket array."""
        return len(self._buckets)

    @property
    def size(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    # -- Core operations ----------------------------------------------------

    def put(self, key: K, value: V) -> None:
        """Insert ``key``, or replace its value in place if already present."""
        if key is None:
            raise InvalidArgumentError("Key cannot be None.", argument="key")
        if value is None:
            raise InvalidArgumentError("Value cannot be None.", argument="value")
        entry = self._lookup(key)
        if entry is not None:
            entry.value = value
            return
        self._insert(_Entry(key, value))

    def get(self, key: K) -> V:
        if key is None:
            raise InvalidArgumentError("Key cannot be None.", argument="key")
        entry = self._lookup(key)
        if entry is None:
            raise NotFoundError(f"No entry for key {key!r}.", key=key)
        return entry.value

    def find(self, key: K, default: V | None = None) -> V | None:
        """Return the value for ``key``, or ``default`` when it is absent."""
        if key is None:
            return default
        entry = self._lookup(key)
        return default if entry is None else entry.value

    def contains(self, key: K) -> bool:
        """Membership test; ``None`` is never contained and never raises."""
        return key is not None and self._lookup(key) is not None

    def remove(self, key: K) -> None:
        if key is None:
            raise InvalidArgumentError("Key cannot be None.", argument="key")
        index = self._index(key)
        bucket = self._buckets[index]
        if bucket is not None:
            for position, entry in enumerate(bucket):
                if entry.key == key:
                    del bucket[position]
                    if not bucket:
                        self._buckets[index] = None
                    self._count -= 1
                    self._version += 1
                    return
        raise NotFoundError(f"No entry for key {key!r}.", key=key)

    def clear(self) -> None:
        """Drop every entry and shrink back to the minimum capacity."""
        self._buckets = [None] * MINIMUM_CAPACITY
        self._count = 0
        self._version += 1

    # -- Diagnostics ----------------------------------------------------------

    def load_factor(self) -> float:
        return self._count / len(self._buckets)

    def collision_bucket_count(self) -> int:
        """Number of buckets holding more than one entry."""
        return sum(1 for bucket in self._buckets if bucket is not None and len(bucket) > 1)

    def max_chain_depth(self) -> int:
        """Entries in the fullest bucket minus one; 0 for an empty table."""
        return max((len(bucket) - 1 for bucket in self._buckets if bucket), default=0)

    # -- Iteration ------------------------------------------------------------

    def __iter__(self) -> Iterator[K]:
        for entry in self._entries():
            yield entry.key

    def keys(self) -> Iterator[K]:
        return iter(self)

    def values(self) -> Iterator[V]:
        for entry in self._entries():
            yield entry.value

    def items(self) -> Iterator[tuple[K, V]]:
        for entry in self._entries():
            yield entry.key, entry.value

    # -- Mapping protocol -----------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        self.remove(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashTable):
            return NotImplemented
        if self._count != other._count:
            return False
        for entry in self._entries():
            match = other._lookup(entry.key)
            if match is None or match.value != entry.value:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HashTable(size={self._count}, capacity={len(self._buckets)})"

    # -- Internal helpers ---------------------------------------------------

    def _index(self, key: Any) -> int:
        return self._hasher(key) & (len(self._buckets) - 1)

    def _lookup(self, key: Any) -> _Entry[K, V] | None:
        bucket = self._buckets[self._index(key)]
        if bucket is None:
            return None
        for entry in bucket:
            if entry.key == key:
                return entry
        return None

    def _insert(self, entry: _Entry[K, V]) -> None:
        """Append a key known to be absent, then grow if overloaded."""
        index = self._index(entry.key)
        bucket = self._buckets[index]
        if bucket is None:
            bucket = self._buckets[index] = []
        bucket.append(entry)
        self._count += 1
        self._version += 1
        if self._count / len(self._buckets) > MAXIMUM_LOAD:
            self._grow()

    def _grow(self) -> None:
        old = self._buckets
        self._buckets = [None] * (len(old) * 2)
        self._count = 0
        for bucket in old:
            if bucket is None:
                continue
            for entry in bucket:
                self._insert(entry)
        logger.debug("Grew hash table from %d to %d buckets", len(old), len(self._buckets))

    def _entries(self) -> Iterator[_Entry[K, V]]:
        version = self._version
        for bucket in self._buckets:
            if bucket is None:
                continue
            for entry in bucket:
                if self._version != version:
                    raise RuntimeError("HashTable changed during iteration")
                yield entry
        if self._version != version:
            raise RuntimeError("HashTable changed during iteration")


def _bucket_count(capacity: int) -> int:
    """Next power of two at or above ``capacity``, never below the minimum."""
    if capacity <= MINIMUM_CAPACITY:
        return MINIMUM_CAPACITY
    return 1 << (capacity - 1).bit_length()
