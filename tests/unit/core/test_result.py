"""Unit tests for FetchResult."""

import pytest

from lms.canvas.core import FetchResult, TransportError


def test_success():
    result = FetchResult.success(42)
    assert result.ok
    assert result.value == 42
    assert result.error is None
    assert result.unwrap() == 42


def test_failure_unwrap_raises_carried_error():
    """unwrap() raises the exact error instance."""
    error = TransportError("down", status_code=500)
    result = FetchResult.failure(error)
    assert not result.ok
    assert result.value is None
    with pytest.raises(TransportError) as exc_info:
        result.unwrap()
    assert exc_info.value is error


def test_success_with_falsy_value():
    """A falsy item is still a success."""
    result = FetchResult.success(0)
    assert result.ok
    assert result.unwrap() == 0


def test_repr():
    assert repr(FetchResult.success("a")) == "FetchResult.success('a')"
    assert repr(FetchResult.failure(TransportError("x"))).startswith("FetchResult.failure(")


def test_frozen():
    result = FetchResult.success(1)
    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]
