"""Tests for custom exception hierarchy."""

import pytest

from recency.errors.exceptions import (
    ConfigError,
    EmptyError,
    InvalidArgumentError,
    NotFoundError,
    RecencyError,
)


class TestExceptionHierarchy:
    def test_all_inherit_from_base(self):
        assert issubclass(InvalidArgumentError, RecencyError)
        assert issubclass(NotFoundError, RecencyError)
        assert issubclass(EmptyError, RecencyError)
        assert issubclass(ConfigError, RecencyError)

    def test_all_inherit_from_exception(self):
        assert issubclass(RecencyError, Exception)


class TestInvalidArgumentError:
    def test_attributes(self):
        err = InvalidArgumentError("Key cannot be None.", argument="key")
        assert err.argument == "key"
        assert err.message == "Key cannot be None."
        assert "cannot be None" in str(err)

    def test_defaults(self):
        err = InvalidArgumentError("bad")
        assert err.argument is None


class TestNotFoundError:
    def test_attributes(self):
        err = NotFoundError("missing", key=42)
        assert err.key == 42

    def test_catchable_as_base(self):
        with pytest.raises(RecencyError):
            raise NotFoundError("missing", key="k")


class TestEmptyError:
    def test_message(self):
        err = EmptyError("Cache is empty.")
        assert str(err) == "Cache is empty."


class TestConfigError:
    def test_source(self):
        err = ConfigError("bad capacity", source="recency.yaml")
        assert err.source == "recency.yaml"
