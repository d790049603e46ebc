"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from ...core.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RESTResponse:
    """Fully-read HTTP response.

    Header names are lower-cased so lookups are case-insensitive.
    """

    url: str
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._default_headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout, headers=self._default_headers
            )
        return self._session

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> RESTResponse:
        """GET request.

        The body is read in full before the connection is released.

        Raises:
            TransportError: On connection failure, timeout, or non-2xx status
        """
        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                body = await response.read()
                result = RESTResponse(
                    url=str(response.url),
                    status=response.status,
                    headers=_flatten_headers(response.headers.items()),
                    body=body,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.debug("GET failed", extra={"url": url, "error_type": type(exc).__name__})
            raise TransportError(f"GET {url} failed: {exc}", url=url) from exc

        if not result.ok:
            raise TransportError(
                f"GET {url} returned HTTP {result.status}",
                url=url,
                status_code=result.status,
            )
        return result

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _flatten_headers(items: Any) -> dict[str, str]:
    # Repeated headers (e.g. two Link lines) are joined as one list value.
    headers: dict[str, str] = {}
    for name, value in items:
        key = name.lower()
        headers[key] = f"{headers[key]}, {value}" if key in headers else value
    return headers
