"""Unit tests for response body decoding."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from lms.canvas.core import DecodeError
from lms.canvas.runtime.rest import decode_items, decode_one


class Item(BaseModel):
    id: int
    name: str | None = None


def test_decode_items(make_response):
    items = decode_items(make_response([{"id": 1}, {"id": 2, "name": "b"}]), Item)
    assert items == [Item(id=1), Item(id=2, name="b")]


def test_decode_items_empty(make_response):
    assert decode_items(make_response([]), Item) == []


def test_decode_items_plain_types(make_response):
    """Any TypeAdapter-compatible type works, not only models."""
    assert decode_items(make_response([1, 2, 3]), int) == [1, 2, 3]


@pytest.mark.parametrize(
    "body",
    [b"not json", b'{"id": 1}', b'[{"id": 1}, {"name": "missing id"}]', b'[{"id": "x"}]'],
)
def test_decode_items_errors(make_response, body):
    """Bad JSON, a non-array body or a bad element fail the whole page."""
    with pytest.raises(DecodeError) as exc_info:
        decode_items(make_response(body), Item)
    assert exc_info.value.target == "Item"
    assert exc_info.value.url.endswith("/courses")


def test_decode_one(make_response):
    assert decode_one(make_response({"id": 5}), Item) == Item(id=5)


def test_decode_one_rejects_array(make_response):
    with pytest.raises(DecodeError):
        decode_one(make_response([{"id": 5}]), Item)
