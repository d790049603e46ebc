"""Grading period model."""

from pydantic import BaseModel, ConfigDict

from .timestamps import OptionalTimestamp


class GradingPeriod(BaseModel):
    id: int
    title: str
    start_date: OptionalTimestamp = None
    end_date: OptionalTimestamp = None
    close_date: OptionalTimestamp = None
    weight: float | None = None
    is_closed: bool | None = None

    model_config = ConfigDict(frozen=True)
