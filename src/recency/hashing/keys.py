"""Key hashers: adapt arbitrary keys to the table's hash function contract."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from recency.hashing.hashers import bob_jenkins, djb, xor_fold
from recency.types import HasherName

KeyHasher = Callable[[Any], int]
ByteHasher = Callable[[bytes], int]

# Width of a CPython hash (Py_hash_t) in bytes.
_HASH_WIDTH = 8

_BYTE_HASHERS: dict[HasherName, ByteHasher] = {
    HasherName.XOR: xor_fold,
    HasherName.BOB_JENKINS: bob_jenkins,
    HasherName.DJB: djb,
}


def identity_hasher(key: Any) -> int:
    """Default key hasher: the key's own ``hash()``."""
    return hash(key)


def byte_hasher(hasher: ByteHasher) -> KeyHasher:
    """Build a key hasher that runs ``hasher`` over ``key_to_bytes(key)``."""

    def hash_key(key: Any) -> int:
        return hasher(key_to_bytes(key))

    hash_key.__name__ = f"{hasher.__name__}_key"
    hash_key.__qualname__ = hash_key.__name__
    return hash_key


def resolve_hasher(name: str | HasherName) -> KeyHasher:
    """Return the key hasher registered under ``name``."""
    try:
        hasher_name = HasherName(name)
    except ValueError:
        valid = ", ".join(h.value for h in HasherName)
        raise ValueError(f"Unknown hasher '{name}'. Expected one of: {valid}") from None
    if hasher_name is HasherName.IDENTITY:
        return identity_hasher
    return byte_hasher(_BYTE_HASHERS[hasher_name])


def key_to_bytes(key: Any) -> bytes:
    """Encode a key as bytes so that equal keys encode identically.

    Bytes-like keys pass through and strings encode as UTF-8. Any other key
    is reduced to its ``hash()`` as 8 signed big-endian bytes, since equal
    objects share a hash even across types (``1``, ``1.0``, ``True``,
    ``Decimal(1)`` and ``(1,)`` against ``(1.0,)``).
    """
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        return key.encode("utf-8")
    return hash(key).to_bytes(_HASH_WIDTH, "big", signed=True)
