"""Structured logging for paginated traversals.

This module provides telemetry hooks for page fetches, emitting structured
logs for observability. URLs are logged as-is; tokens travel only in
headers and never appear here.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    url: str,
    page_index: int,
    items: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully decoded page.

    Args:
        url: URL the page was fetched from
        page_index: Zero-based index of the page within the traversal
        items: Number of items decoded from the page
        has_next: Whether the page advertised a ``next`` link
        latency_ms: Request latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "url": url,
            "page_index": page_index,
            "items": items,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    url: str | None,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log the error that terminated a traversal.

    Args:
        url: URL of the page that failed, if known
        page_index: Zero-based index of the page that failed
        error_type: Exception class name (e.g. "TransportError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "url": url,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_traversal_complete(*, start_url: str, pages: int, items: int) -> None:
    """Log a traversal that ran out of ``next`` links."""
    logger.info(
        "traversal_complete",
        extra={"start_url": start_url, "pages": pages, "items": items},
    )
