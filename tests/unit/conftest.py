"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from lms.canvas.runtime.rest import RESTResponse, RESTTransport

API_ROOT = "https://canvas.example.edu/api/v1"


@pytest.fixture
def api_root() -> str:
    return API_ROOT


@pytest.fixture
def make_response():
    """Build a fully-read RESTResponse with a JSON body and optional Link header."""

    def _make(
        body: Any,
        *,
        link: str | None = None,
        url: str = f"{API_ROOT}/courses",
        status: int = 200,
    ) -> RESTResponse:
        raw = body if isinstance(body, bytes) else json.dumps(body).encode()
        headers = {"link": link} if link is not None else {}
        return RESTResponse(url=url, status=status, headers=headers, body=raw)

    return _make


@pytest.fixture
def mock_transport():
    """RESTTransport double whose get() responses are set per test."""
    transport = MagicMock(spec=RESTTransport)
    transport.get = AsyncMock()
    transport.url_for = MagicMock(side_effect=lambda endpoint: f"{API_ROOT}/{endpoint}")
    return transport


@pytest.fixture
def course_payload():
    """Minimal course JSON object accepted by the Course model."""

    def _make(course_id: int = 1, **overrides: Any) -> dict[str, Any]:
        payload = {
            "id": course_id,
            "uuid": f"uuid-{course_id}",
            "name": f"Course {course_id}",
            "course_code": f"C{course_id}",
            "workflow_state": "available",
            "account_id": 10,
            "root_account_id": 1,
            "enrollment_term_id": 5,
            "default_view": "modules",
            "apply_assignment_group_weights": False,
            "is_public_to_auth_users": False,
            "public_syllabus": False,
            "public_syllabus_to_auth": False,
            "storage_quota_mb": 500,
            "hide_final_grades": False,
            "restrict_enrollments_to_course_dates": False,
            "time_zone": "America/New_York",
            "blueprint": False,
            "template": False,
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def user_payload():
    """Minimal user JSON object accepted by the User model."""

    def _make(user_id: int = 1, **overrides: Any) -> dict[str, Any]:
        payload = {
            "id": user_id,
            "name": f"Sam Student{user_id}",
            "sortable_name": f"Student{user_id}, Sam",
            "last_name": f"Student{user_id}",
            "first_name": "Sam",
            "short_name": "Sam",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def enrollment_payload():
    """Minimal enrollment JSON object accepted by the Enrollment model."""

    def _make(**overrides: Any) -> dict[str, Any]:
        payload = {
            "id": 100,
            "course_id": 1,
            "enrollment_state": "active",
            "limit_privileges_to_course_section": False,
            "type": "StudentEnrollment",
            "user_id": 7,
            "role": "StudentEnrollment",
            "role_id": 3,
        }
        payload.update(overrides)
        return payload

    return _make
