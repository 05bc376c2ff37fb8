"""Shared value types for recency."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

# ── Enums ──


class HasherName(StrEnum):
    IDENTITY = "identity"
    XOR = "xor"
    BOB_JENKINS = "bob_jenkins"
    DJB = "djb"


# ── Handles ──


@dataclass(frozen=True, slots=True)
class NodeHandle:
    """Reference to one recency node inside a cache's node arena.

    ``generation`` changes every time the slot is released, so a handle
    outliving its node never resolves to the node that reuses the slot.
    """

    slot: int
    generation: int
