"""Course endpoints."""

from __future__ import annotations

from typing import Any

from ..models import Course
from ..runtime.rest import PaginatedSequence, RestEndpointSpec, RestRunner


def _course_path(params: dict[str, Any]) -> str:
    return f"courses/{params['course_id']}"


def _user_courses_path(params: dict[str, Any]) -> str:
    return f"users/{params['user_id']}/courses"


GET_COURSE = RestEndpointSpec(id="course", build_path=_course_path, model=Course)

LIST_COURSES = RestEndpointSpec(
    id="courses",
    build_path=lambda _params: "courses",
    model=Course,
    paginated=True,
)

LIST_USER_COURSES = RestEndpointSpec(
    id="user_courses",
    build_path=_user_courses_path,
    model=Course,
    paginated=True,
)


class CourseHandler:
    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def get(self, course_id: int) -> Course:
        """Get a specific course."""
        return await self._runner.fetch(spec=GET_COURSE, params={"course_id": course_id})

    def list(self) -> PaginatedSequence[Course]:
        """List the current user's active courses.

        The current user is the one to which the API token belongs.
        """
        return self._runner.stream(spec=LIST_COURSES, params={})

    def list_for_user(self, user_id: int) -> PaginatedSequence[Course]:
        """List the active courses for a specific user."""
        return self._runner.stream(spec=LIST_USER_COURSES, params={"user_id": user_id})
