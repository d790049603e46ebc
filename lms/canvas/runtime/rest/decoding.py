"""Typed decoding of response bodies."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from ...core.exceptions import DecodeError
from .http_client import RESTResponse

T = TypeVar("T")


@lru_cache(maxsize=64)
def _list_adapter(item_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(list[item_type])


@lru_cache(maxsize=64)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def decode_items(response: RESTResponse, item_type: type[T]) -> list[T]:
    """Decode a JSON array body into a list of ``item_type``.

    Raises:
        DecodeError: If the body is not JSON or any element fails validation
    """
    try:
        return _list_adapter(item_type).validate_json(response.body)
    except ValidationError as exc:
        raise DecodeError(
            f"Could not decode list of {_type_name(item_type)} from {response.url}: {exc}",
            url=response.url,
            target=_type_name(item_type),
        ) from exc


def decode_one(response: RESTResponse, model: type[T]) -> T:
    """Decode a JSON object body into a single ``model``.

    Raises:
        DecodeError: If the body is not JSON or fails validation
    """
    try:
        return _adapter(model).validate_json(response.body)
    except ValidationError as exc:
        raise DecodeError(
            f"Could not decode {_type_name(model)} from {response.url}: {exc}",
            url=response.url,
            target=_type_name(model),
        ) from exc


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))
