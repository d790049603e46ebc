"""Per-item result unit for paginated sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import CanvasError

T = TypeVar("T")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Either a decoded item or the error that ended the traversal.

    Errors are delivered as values so that items already handed to the
    consumer stay valid. A failure is always the last result of a sequence.
    """

    value: T | None = None
    error: CanvasError | None = None

    @classmethod
    def success(cls, value: T) -> FetchResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: CanvasError) -> FetchResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the item, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self.error is not None:
            return f"FetchResult.failure({self.error!r})"
        return f"FetchResult.success({self.value!r})"
