"""Unit tests for user models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lms.canvas.core import AvatarState
from lms.canvas.models import AnonymousUserDisplay, User, UserDisplay


def test_minimal_user(user_payload):
    user = User.model_validate(user_payload(7))
    assert user.id == 7
    assert user.email is None
    assert user.last_login is None
    assert user.enrollments is None


def test_str(user_payload):
    user = User.model_validate(user_payload(7, name="Ada Lovelace"))
    assert str(user) == "Ada Lovelace (id 7)"


def test_optional_fields(user_payload, enrollment_payload):
    user = User.model_validate(
        user_payload(
            avatar_state="re_reported",
            last_login="2024-03-01T12:00:00Z",
            enrollments=[enrollment_payload()],
            email="ada@example.edu",
        )
    )
    assert user.avatar_state == AvatarState.RE_REPORTED
    assert user.last_login.year == 2024
    assert len(user.enrollments) == 1


def test_missing_name(user_payload):
    payload = user_payload()
    del payload["sortable_name"]
    with pytest.raises(ValidationError):
        User.model_validate(payload)


def test_display_models():
    display = UserDisplay(
        id=1,
        short_name="Ada",
        avatar_image_url="https://x/a.png",
        html_url="https://x/users/1",
    )
    anonymous = AnonymousUserDisplay(
        anonymous_id="abc12", avatar_image_url="https://x/a.png", display_name="Student 1"
    )
    assert display.short_name == "Ada"
    assert anonymous.anonymous_id == "abc12"
