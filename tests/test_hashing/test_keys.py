"""Tests for key encoding and key hasher adapters."""

from decimal import Decimal
from fractions import Fraction

import pytest

from recency.hashing.hashers import bob_jenkins, djb, xor_fold
from recency.hashing.keys import byte_hasher, identity_hasher, key_to_bytes, resolve_hasher
from recency.types import HasherName


def _hash_bytes(value) -> bytes:
    return hash(value).to_bytes(8, "big", signed=True)


class TestKeyToBytes:
    def test_bytes_passthrough(self):
        assert key_to_bytes(b"raw") == b"raw"
        assert key_to_bytes(bytearray(b"raw")) == b"raw"
        assert key_to_bytes(memoryview(b"raw")) == b"raw"

    def test_str_utf8(self):
        assert key_to_bytes("héllo") == "héllo".encode("utf-8")

    def test_other_keys_use_hash(self):
        assert key_to_bytes(0) == bytes(8)
        assert key_to_bytes(1) == b"\x00" * 7 + b"\x01"
        assert key_to_bytes(-5) == _hash_bytes(-5)
        assert key_to_bytes((1, "a")) == _hash_bytes((1, "a"))
        assert all(len(key_to_bytes(k)) == 8 for k in (2**100, -(2**100), 1.5, None))

    def test_equal_numbers_share_encoding(self):
        assert (
            key_to_bytes(1)
            == key_to_bytes(1.0)
            == key_to_bytes(True)
            == key_to_bytes(Decimal(1))
            == key_to_bytes(Fraction(1))
        )
        assert key_to_bytes(1.5) == key_to_bytes(Decimal("1.5")) == key_to_bytes(Fraction(3, 2))

    def test_equal_containers_share_encoding(self):
        assert (1,) == (1.0,)
        assert key_to_bytes((1,)) == key_to_bytes((1.0,))
        assert key_to_bytes(frozenset({1, 2})) == key_to_bytes(frozenset({2.0, 1.0}))

    def test_unhashable_key_rejected(self):
        with pytest.raises(TypeError):
            key_to_bytes([1, 2])


class TestByteHasher:
    def test_applies_to_encoded_key(self):
        hasher = byte_hasher(djb)
        assert hasher("a") == djb(b"a")
        assert hasher(7) == djb(b"\x00" * 7 + b"\x07")

    def test_named_after_byte_hasher(self):
        assert byte_hasher(xor_fold).__name__ == "xor_fold_key"

    @pytest.mark.parametrize("func", [xor_fold, bob_jenkins, djb])
    def test_equal_keys_hash_alike(self, func):
        hasher = byte_hasher(func)
        assert hasher((1,)) == hasher((1.0,))
        assert hasher(Decimal(1)) == hasher(1) == hasher(True)


class TestIdentityHasher:
    def test_uses_builtin_hash(self):
        assert identity_hasher(12345) == hash(12345)
        assert identity_hasher("k") == hash("k")


class TestResolveHasher:
    def test_identity(self):
        assert resolve_hasher("identity") is identity_hasher

    @pytest.mark.parametrize(
        ("name", "func"),
        [("xor", xor_fold), ("bob_jenkins", bob_jenkins), ("djb", djb)],
    )
    def test_byte_hashers(self, name, func):
        assert resolve_hasher(name)("abc") == func(b"abc")

    def test_accepts_enum(self):
        assert resolve_hasher(HasherName.DJB)("abc") == djb(b"abc")

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown hasher"):
            resolve_hasher("md5")
