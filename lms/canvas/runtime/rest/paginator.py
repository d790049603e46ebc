"""Lazy traversal of paginated list endpoints.

Architecture:
    A ``PaginatedSequence`` turns one list-endpoint URL into an async
    iterator of ``FetchResult`` items. It keeps an explicit cursor (the URL
    to fetch next, or None once done) and a buffer holding the undelivered
    items of the current page. Each ``__anext__`` either pops the buffer or
    performs exactly one page fetch.

Design Decisions:
    - Pull-driven: nothing is requested until the first item is pulled and
      the next page is only fetched once the buffer is drained. A consumer
      that stops iterating stops all network activity.
    - Strictly sequential pages, no prefetch, so ordering is deterministic.
    - Errors are yielded as the final ``FetchResult`` rather than raised, so
      items already delivered stay usable. No retries.
    - Single pass: an exhausted sequence stays exhausted. Call
      ``paginate()`` again for a fresh, independent traversal.

Request Flow:
    1. Cursor is None → StopAsyncIteration
    2. GET cursor (first request also carries ``params``)
    3. Parse ``Link`` header → PaginationInfo
    4. Decode body as ``list[item_type]`` into the buffer
    5. Cursor ← ``next`` URL; deliver buffered items one by one
"""

from __future__ import annotations

from collections import deque
from collections.abc import AsyncIterator
from time import perf_counter
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ...core.exceptions import CanvasError, PageLimitExceededError
from ...core.result import FetchResult
from .decoding import decode_items
from .link_header import PaginationInfo, parse_link_header
from .telemetry import log_page_error, log_page_fetched, log_traversal_complete

if TYPE_CHECKING:
    from .transport import RESTTransport

T = TypeVar("T")


class PaginatedSequence(Generic[T]):
    """Single-pass async iterator over every item of a paginated endpoint."""

    def __init__(
        self,
        transport: RESTTransport,
        start_url: str,
        item_type: type[T],
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        max_pages: int | None = None,
    ) -> None:
        self._transport = transport
        self._start_url = start_url
        self._item_type = item_type
        self._params = params
        self._headers = headers
        self._max_pages = max_pages

        self._cursor: str | None = start_url
        self._buffer: deque[T] = deque()
        self._exhausted = False
        self._pages_fetched = 0
        self._items_yielded = 0
        self._last_page_info: PaginationInfo | None = None

    @property
    def start_url(self) -> str:
        return self._start_url

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def last_page_info(self) -> PaginationInfo | None:
        """Navigation links of the most recently fetched page."""
        return self._last_page_info

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __aiter__(self) -> PaginatedSequence[T]:
        return self

    async def __anext__(self) -> FetchResult[T]:
        while not self._buffer:
            if self._exhausted:
                raise StopAsyncIteration
            if self._cursor is None:
                self._exhausted = True
                log_traversal_complete(
                    start_url=self._start_url,
                    pages=self._pages_fetched,
                    items=self._items_yielded,
                )
                raise StopAsyncIteration

            try:
                await self._fetch_page(self._cursor)
            except CanvasError as exc:
                self._exhausted = True
                self._cursor = None
                log_page_error(
                    url=getattr(exc, "url", None) or getattr(exc, "next_url", None),
                    page_index=self._pages_fetched,
                    error_type=type(exc).__name__,
                    error_message=str(exc),
                )
                return FetchResult.failure(exc)

        self._items_yielded += 1
        return FetchResult.success(self._buffer.popleft())

    async def _fetch_page(self, url: str) -> None:
        if self._max_pages is not None and self._pages_fetched >= self._max_pages:
            raise PageLimitExceededError(self._max_pages, next_url=url)

        # Query params only apply to the first page; next links embed them.
        params = self._params if self._pages_fetched == 0 else None

        start = perf_counter()
        response = await self._transport.get(url, params=params, headers=self._headers)
        latency_ms = (perf_counter() - start) * 1000.0

        info = parse_link_header(response.header("link"))
        items = decode_items(response, self._item_type)

        self._pages_fetched += 1
        self._last_page_info = info
        self._buffer.extend(items)
        self._cursor = info.next

        log_page_fetched(
            url=url,
            page_index=self._pages_fetched - 1,
            items=len(items),
            has_next=info.has_next,
            latency_ms=latency_ms,
        )

    async def values(self) -> AsyncIterator[T]:
        """Iterate over items, raising the terminal error instead of yielding it."""
        async for result in self:
            yield result.unwrap()

    async def collect(self) -> list[T]:
        """Drain the sequence into a list.

        Raises:
            CanvasError: The error that terminated the traversal, if any
        """
        return [item async for item in self.values()]


def paginate(
    transport: RESTTransport,
    start_url: str,
    item_type: type[T],
    *,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    max_pages: int | None = None,
) -> PaginatedSequence[T]:
    """Start a new, independent traversal at ``start_url``.

    No request is issued until the returned sequence is iterated.
    """
    return PaginatedSequence(
        transport,
        start_url,
        item_type,
        params=params,
        headers=headers,
        max_pages=max_pages,
    )
