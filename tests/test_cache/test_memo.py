"""Tests for the memoize decorator."""

from recency.cache.lru import RecencyCache
from recency.cache.memo import default_key, memoize


class TestDefaultKey:
    def test_positional_only(self):
        assert default_key(1, "a") == (1, "a")

    def test_keyword_order_independent(self):
        assert default_key(1, b=2, a=1) == default_key(1, a=1, b=2)

    def test_keywords_distinct_from_positionals(self):
        assert default_key(("a", 1)) != default_key(a=1)


class TestMemoize:
    def test_computes_once_per_key(self):
        cache = RecencyCache(8)
        calls = []

        @memoize(cache)
        def square(n):
            calls.append(n)
            return n * n

        assert square(4) == 16
        assert square(4) == 16
        assert square(5) == 25
        assert calls == [4, 5]
        assert cache.stats().hits == 1
        assert cache.stats().misses == 2

    def test_eviction_forces_recompute(self):
        cache = RecencyCache(2)
        calls = []

        @memoize(cache)
        def ident(n):
            calls.append(n)
            return n

        for n in (1, 2, 3, 1):
            ident(n)
        assert calls == [1, 2, 3, 1]

    def test_custom_key(self):
        cache = RecencyCache(4)

        @memoize(cache, key=lambda text: text.lower())
        def shout(text):
            return text.upper()

        shout("Hello")
        assert shout("HELLO") == "HELLO"
        assert list(cache.keys()) == ["hello"]

    def test_wrapper_metadata(self):
        cache = RecencyCache(4)

        @memoize(cache)
        def documented():
            """Docstring."""
            return 1

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
        assert documented.cache is cache
