"""REST request runner using endpoint specs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .decoding import decode_one
from .paginator import PaginatedSequence, paginate
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    build_path: Callable[[dict[str, Any]], str]
    model: Any  # pydantic model (or any TypeAdapter-compatible type)
    paginated: bool = False
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None


class RestRunner:
    def __init__(
        self,
        transport: RESTTransport,
        *,
        per_page: int | None = None,
        max_pages: int | None = None,
    ) -> None:
        self._t = transport
        self._per_page = per_page
        self._max_pages = max_pages

    async def fetch(self, *, spec: RestEndpointSpec, params: dict[str, Any]) -> Any:
        """Fetch a single resource; errors propagate directly."""
        if spec.paginated:
            raise ValueError(f"Endpoint {spec.id!r} is paginated; use stream()")

        url = self._t.url_for(spec.build_path(params))
        query = spec.build_query(params) if spec.build_query else None
        response = await self._t.get(url, params=query)
        return decode_one(response, spec.model)

    def stream(self, *, spec: RestEndpointSpec, params: dict[str, Any]) -> PaginatedSequence[Any]:
        """Lazy sequence over every page of a list endpoint."""
        if not spec.paginated:
            raise ValueError(f"Endpoint {spec.id!r} is not paginated; use fetch()")

        query = spec.build_query(params) if spec.build_query else None
        return self.stream_url(self._t.url_for(spec.build_path(params)), spec.model, query=query)

    def stream_url(
        self,
        url: str,
        item_type: Any,
        *,
        query: dict[str, Any] | None = None,
    ) -> PaginatedSequence[Any]:
        """Lazy sequence from an endpoint URL with ``per_page`` and ``max_pages`` applied."""
        query = dict(query or {})
        if self._per_page is not None:
            query.setdefault("per_page", self._per_page)
        return paginate(
            self._t,
            url,
            item_type,
            params=query or None,
            max_pages=self._max_pages,
        )
