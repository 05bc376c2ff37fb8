"""Byte hashers: map a byte sequence to a signed 32-bit integer.

These pick bucket indices; none of them is suitable for security purposes.
"""

from __future__ import annotations

from typing import Literal

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000
_GOLDEN_RATIO = 0x9E3779B9
_DJB_SEED = 5381
_BLOCK = 12

# (a, b, c) shift amounts for the three mixing rounds
_MIX_SHIFTS = ((13, 8, 13), (12, 16, 5), (3, 10, 15))


def xor_fold(data: bytes) -> int:
    """XOR successive big-endian 4-byte words, zero-padding the last one."""
    data = bytes(data)
    result = 0
    for i in range(0, len(data), 4):
        result ^= _word(data, i, "big")
    return _to_int32(result)


def bob_jenkins(data: bytes) -> int:
    """Bob Jenkins' one-at-a-time mix over 12-byte little-endian blocks.

    The length is folded into the last block. A key whose length is a
    multiple of 12 still gets a trailing all-zero block.
    """
    data = bytes(data)
    length = len(data)
    a = b = _GOLDEN_RATIO
    c = _MASK
    for i in range(0, length + 1, _BLOCK):
        last = length - i < _BLOCK
        if last:
            c = (c + length) & _MASK
        a = (a + _word(data, i, "little")) & _MASK
        b = (b + _word(data, i + 4, "little")) & _MASK
        c = (c + ((_word(data, i + 8, "little") << (8 if last else 0)) & _MASK)) & _MASK
        a, b, c = _mix(a, b, c)
    return _to_int32(c)


def djb(data: bytes) -> int:
    """Daniel J. Bernstein's additive hash: ``h += (h << 5) + byte``."""
    h = _DJB_SEED
    for byte in bytes(data):
        h = (h + (h << 5) + byte) & _MASK
    return _to_int32(h)


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    for shift_a, shift_b, shift_c in _MIX_SHIFTS:
        a = (a - b - c) & _MASK
        a ^= c >> shift_a
        b = (b - c - a) & _MASK
        b ^= (a << shift_b) & _MASK
        c = (c - a - b) & _MASK
        c ^= b >> shift_c
    return a, b, c


def _word(data: bytes, offset: int, byteorder: Literal["big", "little"]) -> int:
    """Read 4 bytes at ``offset``; bytes past the end count as zero."""
    chunk = data[offset : offset + 4]
    return int.from_bytes(chunk.ljust(4, b"\x00"), byteorder)


def _to_int32(value: int) -> int:
    value &= _MASK
    return value - (1 << 32) if value & _SIGN_BIT else value
