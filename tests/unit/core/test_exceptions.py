"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from lms.canvas.core import (
    CanvasError,
    ConfigurationError,
    DecodeError,
    PageLimitExceededError,
    PaginationError,
    PaginationFormatError,
    TransportError,
)


def test_transport_error_with_status_code():
    """TransportError carries the URL and status."""
    error = TransportError("failed", url="https://h/api/v1/courses", status_code=503)
    assert str(error) == "failed"
    assert error.status_code == 503
    assert error.url == "https://h/api/v1/courses"
    assert isinstance(error, CanvasError)


def test_transport_error_without_status():
    """Connection failures have no status."""
    assert TransportError("refused").status_code is None


def test_pagination_format_error_keeps_header():
    error = PaginationFormatError("bad", header="<x>; rel=next")
    assert error.header == "<x>; rel=next"
    assert isinstance(error, PaginationError)
    assert isinstance(error, CanvasError)


def test_page_limit_exceeded_message():
    """The message names the ceiling and the remaining link."""
    error = PageLimitExceededError(3, next_url="https://h/api/v1/courses?page=4")
    assert error.max_pages == 3
    assert "3 pages" in str(error)
    assert "page=4" in str(error)
    assert isinstance(error, PaginationError)


def test_decode_error_target():
    error = DecodeError("bad body", url="https://h", target="Course")
    assert error.target == "Course"
    assert isinstance(error, CanvasError)


def test_configuration_error_is_canvas_error():
    assert issubclass(ConfigurationError, CanvasError)
    assert not issubclass(ConfigurationError, TransportError)
