"""Authenticated REST transport for the Canvas API."""

from __future__ import annotations

from typing import Any

from .auth import bearer_auth_header
from .http_client import HTTPClient, RESTResponse


class RESTTransport:
    """Thin wrapper around HTTPClient bound to one Canvas instance.

    Every request carries the bearer ``Authorization`` header. The token is
    validated here, so a bad token fails at construction time rather than on
    the first request.
    """

    def __init__(
        self,
        base_url: str,
        api_token: str,
        *,
        api_version: str = "v1",
        timeout: float = 30.0,
    ) -> None:
        self.api_root = f"{base_url.rstrip('/')}/api/{api_version}"
        self._http = HTTPClient(timeout=timeout, headers=bearer_auth_header(api_token))

    def url_for(self, endpoint: str) -> str:
        """Absolute URL for an endpoint path such as ``courses/42``."""
        return f"{self.api_root}/{endpoint.lstrip('/')}"

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> RESTResponse:
        return await self._http.get(url, params=params, headers=headers)

    async def close(self) -> None:
        await self._http.close()
