"""Course data model."""

from pydantic import BaseModel, ConfigDict

from ..core.enums import CourseFormat, GradePassbackSetting, PageType, Permission, WorkflowState
from .blueprint import BlueprintRestrictions
from .enrollment import Enrollment
from .grading_period import GradingPeriod
from .timestamps import OptionalTimestamp


class Term(BaseModel):
    id: int
    name: str
    start_at: OptionalTimestamp = None
    end_at: OptionalTimestamp = None

    model_config = ConfigDict(frozen=True)


class CourseProgress(BaseModel):
    """Module completion progress for the requesting user."""

    requirement_count: int  # across all modules
    requirement_completed_count: int
    # None once the course is completed or progress is not sequential
    next_requirement_url: str | None = None
    completed_at: OptionalTimestamp = None

    model_config = ConfigDict(frozen=True)


class CalendarLink(BaseModel):
    ics: str

    model_config = ConfigDict(frozen=True)


class Course(BaseModel):
    """A Canvas course.

    Optional fields are only returned when the token's user may see them or
    when requested through ``include[]`` parameters.
    """

    id: int
    sis_course_id: str | None = None
    uuid: str
    integration_id: str | None = None
    sis_import_id: int | None = None
    name: str  # the user's nickname for the course, if set
    course_code: str
    original_name: str | None = None
    workflow_state: WorkflowState
    account_id: int
    root_account_id: int
    enrollment_term_id: int
    grading_periods: list[GradingPeriod] | None = None
    grading_standard_id: int | None = None
    grade_passback_setting: GradePassbackSetting | None = None
    created_at: OptionalTimestamp = None
    start_at: OptionalTimestamp = None
    end_at: OptionalTimestamp = None
    locale: str | None = None
    enrollments: list[Enrollment] | None = None
    total_students: int | None = None
    calendar: CalendarLink | None = None
    default_view: PageType
    syllabus_body: str | None = None
    needs_grading_count: int | None = None
    term: Term | None = None
    course_progress: CourseProgress | None = None
    apply_assignment_group_weights: bool
    permissions: dict[str, bool] | None = None
    is_public: bool | None = None
    is_public_to_auth_users: bool
    public_syllabus: bool
    public_syllabus_to_auth: bool
    public_description: str | None = None
    storage_quota_mb: int
    storage_quota_used_mb: float | None = None
    hide_final_grades: bool
    license: str | None = None
    allow_student_assignment_edits: bool | None = None
    allow_wiki_comments: bool | None = None
    allow_student_forum_attachments: bool | None = None
    open_enrollment: bool | None = None
    self_enrollment: bool | None = None
    restrict_enrollments_to_course_dates: bool
    course_format: CourseFormat | None = None
    access_restricted_by_date: bool | None = None
    time_zone: str
    blueprint: bool
    blueprint_restrictions: BlueprintRestrictions | None = None
    template: bool

    model_config = ConfigDict(frozen=True)

    def has_permission(self, permission: Permission | str) -> bool:
        """Whether ``permissions`` grants ``permission``.

        False when permissions were not requested or the key is absent.
        """
        if not self.permissions:
            return False
        key = permission.value if isinstance(permission, Permission) else permission
        return self.permissions.get(key, False)

    def __str__(self) -> str:
        return f"{self.name} (id {self.id})"
