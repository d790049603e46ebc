"""Custom exception hierarchy."""

from __future__ import annotations


class CanvasError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(CanvasError):
    """Invalid client construction input.

    Raised before any request is made, e.g. for an empty base URL or an API
    token containing characters that cannot be sent in an HTTP header.
    """

    pass


class TransportError(CanvasError):
    """Request could not be sent or the server returned a failure status."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class PaginationError(CanvasError):
    """Pagination protocol failure."""

    pass


class PaginationFormatError(PaginationError):
    """``Link`` header was present but did not follow the expected grammar.

    Fatal for the current traversal.
    """

    def __init__(self, message: str, header: str | None = None) -> None:
        super().__init__(message)
        self.header = header


class PageLimitExceededError(PaginationError):
    """Configured page ceiling was reached while a ``next`` link remained."""

    def __init__(self, max_pages: int, next_url: str | None = None) -> None:
        super().__init__(f"Stopped after {max_pages} pages; more pages remain at {next_url}")
        self.max_pages = max_pages
        self.next_url = next_url


class DecodeError(CanvasError):
    """Response body did not match the expected typed shape."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        target: str | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.target = target


# Errors a paginated traversal can terminate with.
FetchError = TransportError | PaginationError | DecodeError
