"""User data models."""

from pydantic import BaseModel, ConfigDict

from ..core.enums import AvatarState
from .enrollment import Enrollment
from .timestamps import OptionalTimestamp


class UserDisplay(BaseModel):
    """Abbreviated user shown alongside other records."""

    id: int
    short_name: str
    avatar_image_url: str
    html_url: str

    model_config = ConfigDict(frozen=True)


class AnonymousUserDisplay(BaseModel):
    anonymous_id: str
    avatar_image_url: str
    display_name: str

    model_config = ConfigDict(frozen=True)


class User(BaseModel):
    id: int
    name: str
    sortable_name: str
    last_name: str
    first_name: str
    short_name: str
    sis_user_id: str | None = None
    sis_import_id: int | None = None
    integration_id: str | None = None
    login_id: str | None = None
    avatar_url: str | None = None
    avatar_state: AvatarState | None = None
    enrollments: list[Enrollment] | None = None
    email: str | None = None
    locale: str | None = None
    last_login: OptionalTimestamp = None
    time_zone: str | None = None
    bio: str | None = None

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.name} (id {self.id})"
