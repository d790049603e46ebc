"""Blueprint course restriction model."""

from pydantic import BaseModel, ConfigDict


class BlueprintRestrictions(BaseModel):
    """Editing restrictions applied to content copied from a blueprint course."""

    content: bool  # title, description, and other main content
    points: bool  # points possible on graded items
    due_dates: bool
    availability_dates: bool

    model_config = ConfigDict(frozen=True)
