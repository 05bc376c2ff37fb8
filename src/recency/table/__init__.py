"""Hash table subsystem: chained buckets with pluggable key hashers."""

from recency.table.dictionary import MAXIMUM_LOAD, MINIMUM_CAPACITY, HashTable

__all__ = ["HashTable", "MAXIMUM_LOAD", "MINIMUM_CAPACITY"]
