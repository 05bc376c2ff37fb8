"""Hash functions: byte hashers and key hasher adapters."""

from recency.hashing.hashers import bob_jenkins, djb, xor_fold
from recency.hashing.keys import (
    ByteHasher,
    KeyHasher,
    byte_hasher,
    identity_hasher,
    key_to_bytes,
    resolve_hasher,
)

__all__ = [
    "ByteHasher",
    "KeyHasher",
    "bob_jenkins",
    "byte_hasher",
    "djb",
    "identity_hasher",
    "key_to_bytes",
    "resolve_hasher",
    "xor_fold",
]
