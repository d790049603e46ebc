"""Canvas client handle.

The ``Canvas`` object bundles the base URL, the authenticated transport and
the pagination settings. It is constructed explicitly and passed around;
independent clients share nothing.

Usage:
    >>> async with Canvas.init("https://canvas.example.edu", token) as canvas:
    ...     async for result in canvas.courses().list():
    ...         course = result.unwrap()
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from ..api import CourseHandler, UserHandler
from ..config import CanvasConfig
from ..runtime.rest import (
    PaginatedSequence,
    RESTResponse,
    RestRunner,
    RESTTransport,
    decode_one,
    paginate,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Canvas:
    """Client for one Canvas instance."""

    def __init__(self, config: CanvasConfig) -> None:
        self.config = config
        self._transport = RESTTransport(
            config.base_url,
            config.api_token,
            api_version=config.api_version,
            timeout=config.timeout,
        )
        self._runner = RestRunner(
            self._transport,
            per_page=config.per_page,
            max_pages=config.max_pages,
        )
        logger.debug("Canvas client created", extra={"api_root": config.api_root})

    @classmethod
    def init(cls, base_url: str, api_token: str, **options: Any) -> Canvas:
        """Create a client from a base URL and access token.

        Args:
            base_url: Instance URL without the API path, e.g. ``https://canvas.example.edu``
            api_token: Access token sent as a bearer token
            **options: Remaining ``CanvasConfig`` fields (api_version, timeout,
                per_page, max_pages)

        Raises:
            ConfigurationError: If the URL or token is unusable
        """
        return cls(CanvasConfig(base_url=base_url, api_token=api_token, **options))

    @classmethod
    def from_env(cls) -> Canvas:
        return cls(CanvasConfig.from_env())

    def url_from_endpoint(self, endpoint: str) -> str:
        return self._transport.url_for(endpoint)

    async def get(self, url: str, headers: dict[str, str] | None = None) -> RESTResponse:
        """Raw GET against an absolute URL.

        Raises:
            TransportError: On connection failure, timeout, or non-2xx status
        """
        return await self._transport.get(url, headers=headers)

    async def get_endpoint(
        self,
        endpoint: str,
        model: type[T],
        headers: dict[str, str] | None = None,
    ) -> T:
        """Fetch and decode a single resource.

        Raises:
            TransportError: If the request fails
            DecodeError: If the body does not match ``model``
        """
        response = await self.get(self.url_from_endpoint(endpoint), headers=headers)
        return decode_one(response, model)

    def stream_endpoint(self, endpoint: str, item_type: type[T]) -> PaginatedSequence[T]:
        """Lazy sequence over every item of a list endpoint."""
        return self._runner.stream_url(self.url_from_endpoint(endpoint), item_type)

    def paginate(self, url: str, item_type: type[T]) -> PaginatedSequence[T]:
        """Lazy sequence starting at an absolute URL, e.g. a saved ``next`` link."""
        return paginate(self._transport, url, item_type, max_pages=self.config.max_pages)

    def courses(self) -> CourseHandler:
        return CourseHandler(self._runner)

    def users(self) -> UserHandler:
        return UserHandler(self._runner)

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> Canvas:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
