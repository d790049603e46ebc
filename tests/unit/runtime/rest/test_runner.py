"""Precise unit tests for RestRunner.

Tests focus on endpoint execution, parameter building, and error handling.
"""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from lms.canvas.core import DecodeError, TransportError
from lms.canvas.runtime.rest import PaginatedSequence, RestEndpointSpec, RestRunner


class Thing(BaseModel):
    id: int


SINGLE = RestEndpointSpec(id="thing", build_path=lambda p: f"things/{p['id']}", model=Thing)
LISTING = RestEndpointSpec(
    id="things",
    build_path=lambda p: "things",
    model=Thing,
    paginated=True,
    build_query=lambda p: {"include[]": "extra"},
)


class TestRestRunnerFetch:
    """Single-resource endpoints."""

    @pytest.mark.asyncio
    async def test_fetch_decodes_model(self, mock_transport, make_response, api_root):
        """GET the built path and decode one model."""
        mock_transport.get.return_value = make_response({"id": 9})
        runner = RestRunner(mock_transport)

        result = await runner.fetch(spec=SINGLE, params={"id": 9})

        assert result == Thing(id=9)
        mock_transport.get.assert_awaited_once_with(f"{api_root}/things/9", params=None)

    @pytest.mark.asyncio
    async def test_fetch_propagates_transport_error(self, mock_transport):
        """Errors are raised directly for single resources."""
        mock_transport.get.side_effect = TransportError("nope", status_code=404)
        runner = RestRunner(mock_transport)

        with pytest.raises(TransportError):
            await runner.fetch(spec=SINGLE, params={"id": 1})

    @pytest.mark.asyncio
    async def test_fetch_propagates_decode_error(self, mock_transport, make_response):
        mock_transport.get.return_value = make_response([{"id": 1}])
        runner = RestRunner(mock_transport)

        with pytest.raises(DecodeError) as exc_info:
            await runner.fetch(spec=SINGLE, params={"id": 1})
        assert exc_info.value.target == "Thing"

    @pytest.mark.asyncio
    async def test_fetch_rejects_paginated_spec(self, mock_transport):
        with pytest.raises(ValueError):
            await RestRunner(mock_transport).fetch(spec=LISTING, params={})


class TestRestRunnerStream:
    """Paginated endpoints."""

    @pytest.mark.asyncio
    async def test_stream_is_lazy(self, mock_transport):
        """stream() returns a sequence without issuing a request."""
        sequence = RestRunner(mock_transport).stream(spec=LISTING, params={})

        assert isinstance(sequence, PaginatedSequence)
        mock_transport.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_stream_merges_query_and_per_page(self, mock_transport, make_response, api_root):
        """per_page is added to the first request's query."""
        mock_transport.get.return_value = make_response([{"id": 1}, {"id": 2}])
        runner = RestRunner(mock_transport, per_page=50)

        items = await runner.stream(spec=LISTING, params={}).collect()

        assert items == [Thing(id=1), Thing(id=2)]
        mock_transport.get.assert_awaited_once_with(
            f"{api_root}/things",
            params={"include[]": "extra", "per_page": 50},
            headers=None,
        )

    @pytest.mark.asyncio
    async def test_stream_applies_max_pages(self, mock_transport, make_response, api_root):
        """The runner's page ceiling is passed to the sequence."""
        mock_transport.get.return_value = make_response(
            [{"id": 1}], link=f'<{api_root}/things?page=2>; rel="next"'
        )
        runner = RestRunner(mock_transport, max_pages=1)

        results = [r async for r in runner.stream(spec=LISTING, params={})]

        assert results[0].ok
        assert not results[1].ok
        assert mock_transport.get.await_count == 1

    def test_stream_rejects_single_spec(self, mock_transport):
        with pytest.raises(ValueError):
            RestRunner(mock_transport).stream(spec=SINGLE, params={"id": 1})


class TestRestRunnerStreamUrl:
    """Sequences started from a ready-made endpoint URL."""

    @pytest.mark.asyncio
    async def test_per_page_added(self, mock_transport, make_response, api_root):
        mock_transport.get.return_value = make_response([{"id": 1}])
        runner = RestRunner(mock_transport, per_page=25)

        items = await runner.stream_url(f"{api_root}/things", Thing).collect()

        assert items == [Thing(id=1)]
        mock_transport.get.assert_awaited_once_with(
            f"{api_root}/things", params={"per_page": 25}, headers=None
        )

    @pytest.mark.asyncio
    async def test_explicit_per_page_wins(self, mock_transport, make_response, api_root):
        mock_transport.get.return_value = make_response([])
        runner = RestRunner(mock_transport, per_page=25)

        await runner.stream_url(f"{api_root}/things", Thing, query={"per_page": 5}).collect()

        assert mock_transport.get.await_args.kwargs["params"] == {"per_page": 5}

    @pytest.mark.asyncio
    async def test_no_query(self, mock_transport, make_response, api_root):
        mock_transport.get.return_value = make_response([])

        await RestRunner(mock_transport).stream_url(f"{api_root}/things", Thing).collect()

        assert mock_transport.get.await_args.kwargs["params"] is None
