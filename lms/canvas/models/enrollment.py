"""Enrollment data model."""

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import EnrollmentState, EnrollmentType
from .timestamps import OptionalTimestamp


class Grade(BaseModel):
    """Grade summary attached to a student enrollment.

    Scores are floats; Canvas reports fractional percentages and points.
    """

    html_url: str | None = None
    current_grade: str | None = None
    final_grade: str | None = None
    current_score: float | None = None
    final_score: float | None = None
    current_points: float | None = None
    unposted_current_grade: str | None = None
    unposted_final_grade: str | None = None
    unposted_current_score: float | None = None
    unposted_final_score: float | None = None
    unposted_current_points: float | None = None

    model_config = ConfigDict(frozen=True)


class Enrollment(BaseModel):
    """A user's membership in a course section.

    ``enrollment_type`` and ``role`` resolve to ``EnrollmentType`` for the
    built-in roles and stay plain strings for custom account roles.
    """

    id: int | None = None
    course_id: int | None = None
    sis_course_id: str | None = None
    course_integration_id: str | None = None
    course_section_id: int | None = None
    section_integration_id: str | None = None
    sis_account_id: str | None = None
    sis_section_id: str | None = None
    sis_user_id: str | None = None
    enrollment_state: EnrollmentState
    limit_privileges_to_course_section: bool
    sis_import_id: int | None = None
    root_account_id: int | None = None
    enrollment_type: EnrollmentType | str = Field(alias="type", union_mode="left_to_right")
    user_id: int
    associated_user_id: int | None = None
    role: EnrollmentType | str = Field(union_mode="left_to_right")
    role_id: int
    created_at: OptionalTimestamp = None
    updated_at: OptionalTimestamp = None
    start_at: OptionalTimestamp = None
    end_at: OptionalTimestamp = None
    last_activity_at: OptionalTimestamp = None
    last_attended_at: OptionalTimestamp = None
    total_activity_time: int | None = None
    html_url: str | None = None
    grades: Grade | None = None

    # Only present for the current user's own student enrollments
    override_grade: str | None = None
    override_score: float | None = None
    unposted_current_grade: str | None = None
    unposted_final_grade: str | None = None
    unposted_current_score: float | None = None
    unposted_final_score: float | None = None
    has_grading_periods: bool | None = None
    totals_for_all_grading_periods_option: bool | None = None
    current_grading_period_title: str | None = None
    current_grading_period_id: int | None = None
    current_period_override_grade: str | None = None
    current_period_override_score: float | None = None
    current_period_unposted_current_score: float | None = None
    current_period_unposted_final_score: float | None = None
    current_period_unposted_current_grade: str | None = None
    current_period_unposted_final_grade: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)
