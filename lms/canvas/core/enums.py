"""Core enumerations for the string-tagged values Canvas returns.

Architecture:
    Every enum here is a ``str`` enum so that members compare equal to the
    raw JSON tags and serialize back unchanged. Pydantic decodes them by
    value.

Key Types:
    - WorkflowState, PageType, CourseFormat, GradePassbackSetting: courses
    - AvatarState: users
    - EnrollmentState, EnrollmentType: enrollments
    - Permission: account and course permission keys

See Also:
    - Canvas REST API reference: https://canvas.instructure.com/doc/api/
"""

from enum import Enum


class PageType(str, Enum):
    """Default landing page of a course."""

    FEED = "feed"
    WIKI = "wiki"
    MODULES = "modules"
    ASSIGNMENTS = "assignments"
    SYLLABUS = "syllabus"


class GradePassbackSetting(str, Enum):
    NIGHTLY_SYNC = "nightly_sync"
    DISABLED = "disabled"
    EMPTY = "empty"


class CourseFormat(str, Enum):
    ON_CAMPUS = "on_campus"
    ONLINE = "online"
    BLENDED = "blended"


class WorkflowState(str, Enum):
    """Lifecycle state of a course."""

    UNPUBLISHED = "unpublished"
    AVAILABLE = "available"
    COMPLETED = "completed"
    DELETED = "deleted"


class AvatarState(str, Enum):
    NONE = "none"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    LOCKED = "locked"
    REPORTED = "reported"
    RE_REPORTED = "re_reported"


class EnrollmentState(str, Enum):
    ACTIVE = "active"
    INVITED = "invited"
    INACTIVE = "inactive"


class EnrollmentType(str, Enum):
    """Built-in enrollment roles.

    Canvas reports the role name (``StudentEnrollment``) in ``role`` and the
    short form (``student``) in ``type``; both spellings resolve to the same
    member. Custom account roles are not members and stay plain strings on
    the models.
    """

    STUDENT = "StudentEnrollment"
    TEACHER = "TeacherEnrollment"
    TA = "TaEnrollment"
    OBSERVER = "ObserverEnrollment"
    DESIGNER = "DesignerEnrollment"

    @classmethod
    def _missing_(cls, value: object) -> "EnrollmentType | None":
        if isinstance(value, str):
            return _ENROLLMENT_SHORT_NAMES.get(value.lower())
        return None


_ENROLLMENT_SHORT_NAMES = {
    "student": EnrollmentType.STUDENT,
    "teacher": EnrollmentType.TEACHER,
    "ta": EnrollmentType.TA,
    "observer": EnrollmentType.OBSERVER,
    "designer": EnrollmentType.DESIGNER,
}


class Permission(str, Enum):
    """Permission keys reported in a course's ``permissions`` map."""

    # Account level
    BECOME_USER = "become_user"
    IMPORT_SIS = "import_sis"
    MANAGE_ACCOUNT_MEMBERSHIPS = "manage_account_memberships"
    MANAGE_ACCOUNT_SETTINGS = "manage_account_settings"
    MANAGE_ALERTS = "manage_alerts"
    MANAGE_CATALOG = "manage_catalog"
    ADD_COURSE_TEMPLATE = "add_course_template"
    DELETE_COURSE_TEMPLATE = "delete_course_template"
    EDIT_COURSE_TEMPLATE = "edit_course_template"
    MANAGE_COURSES_ADD = "manage_courses_add"
    MANAGE_COURSES_ADMIN = "manage_courses_admin"
    MANAGE_DEVELOPER_KEYS = "manage_developer_keys"
    MANAGE_FEATURE_FLAGS = "manage_feature_flags"
    MANAGE_MASTER_COURSES = "manage_master_courses"
    MANAGE_ROLE_OVERRIDES = "manage_role_overrides"
    MANAGE_STORAGE_QUOTAS = "manage_storage_quotas"
    MANAGE_SIS = "manage_sis"
    TEMPORARY_ENROLLMENTS_ADD = "temporary_enrollments_add"
    TEMPORARY_ENROLLMENTS_EDIT = "temporary_enrollments_edit"
    TEMPORARY_ENROLLMENTS_DELETE = "temporary_enrollments_delete"
    MANAGE_USER_LOGINS = "manage_user_logins"
    MANAGE_USER_OBSERVERS = "manage_user_observers"
    MODERATE_USER_CONTENT = "moderate_user_content"
    READ_COURSE_CONTENT = "read_course_content"
    READ_COURSE_LIST = "read_course_list"
    VIEW_COURSE_CHANGES = "view_course_changes"
    VIEW_FEATURE_FLAGS = "view_feature_flags"
    VIEW_GRADE_CHANGES = "view_grade_changes"
    VIEW_NOTIFICATIONS = "view_notifications"
    VIEW_QUIZ_ANSWER_AUDITS = "view_quiz_answer_audits"
    VIEW_STATISTICS = "view_statistics"
    UNDELETE_COURSES = "undelete_courses"

    # Course level
    ALLOW_COURSE_ADMIN_ACTIONS = "allow_course_admin_actions"
    CREATE_COLLABORATIONS = "create_collaborations"
    CREATE_CONFERENCES = "create_conferences"
    CREATE_FORUM = "create_forum"
    GENERATE_OBSERVER_PAIRING_CODE = "generate_observer_pairing_code"
    IMPORT_OUTCOMES = "import_outcomes"
    LTI_ADD_EDIT = "lti_add_edit"
    MANAGE_ACCOUNT_BANKS = "manage_account_banks"
    SHARE_BANKS_WITH_SUBACCOUNTS = "share_banks_with_subaccounts"
    MANAGE_ASSIGNMENTS = "manage_assignments"
    MANAGE_ASSIGNMENTS_ADD = "manage_assignments_add"
    MANAGE_ASSIGNMENTS_EDIT = "manage_assignments_edit"
    MANAGE_ASSIGNMENTS_DELETE = "manage_assignments_delete"
    MANAGE_CALENDAR = "manage_calendar"
    MANAGE_CONTENT = "manage_content"
    MANAGE_COURSE_VISIBILITY = "manage_course_visibility"
    MANAGE_COURSES_CONCLUDE = "manage_courses_conclude"
    MANAGE_COURSES_DELETE = "manage_courses_delete"
    MANAGE_COURSES_PUBLISH = "manage_courses_publish"
    MANAGE_COURSES_RESET = "manage_courses_reset"
    MANAGE_FILES_ADD = "manage_files_add"
    MANAGE_FILES_EDIT = "manage_files_edit"
    MANAGE_FILES_DELETE = "manage_files_delete"
    MANAGE_GRADES = "manage_grades"
    MANAGE_GROUPS_ADD = "manage_groups_add"
    MANAGE_GROUPS_DELETE = "manage_groups_delete"
    MANAGE_GROUPS_MANAGE = "manage_groups_manage"
    MANAGE_INTERACTION_ALERTS = "manage_interaction_alerts"
    MANAGE_OUTCOMES = "manage_outcomes"
    MANAGE_PROFICIENCY_CALCULATIONS = "manage_proficiency_calculations"
    MANAGE_PROFICIENCY_SCALES = "manage_proficiency_scales"
    MANAGE_SECTIONS_ADD = "manage_sections_add"
    MANAGE_SECTIONS_EDIT = "manage_sections_edit"
    MANAGE_SECTIONS_DELETE = "manage_sections_delete"
    MANAGE_STUDENTS = "manage_students"
    MANAGE_USER_NOTES = "manage_user_notes"
    MANAGE_RUBRICS = "manage_rubrics"
    MANAGE_WIKI_CREATE = "manage_wiki_create"
    MANAGE_WIKI_DELETE = "manage_wiki_delete"
    MANAGE_WIKI_UPDATE = "manage_wiki_update"
    MODERATE_FORUM = "moderate_forum"
    POST_TO_FORUM = "post_to_forum"
    READ_ANNOUNCEMENTS = "read_announcements"
    READ_EMAIL_ADDRESSES = "read_email_addresses"
    READ_FORUM = "read_forum"
    READ_QUESTION_BANKS = "read_question_banks"
    READ_REPORTS = "read_reports"
    READ_ROSTER = "read_roster"
    READ_SIS = "read_sis"
    SELECT_FINAL_GRADE = "select_final_grade"
    SEND_MESSAGES = "send_messages"
    SEND_MESSAGES_ALL = "send_messages_all"
    ADD_TEACHER_TO_COURSE = "add_teacher_to_course"
    REMOVE_TEACHER_FROM_COURSE = "remove_teacher_from_course"
    ADD_TA_TO_COURSE = "add_ta_to_course"
    REMOVE_TA_FROM_COURSE = "remove_ta_from_course"
    ADD_DESIGNER_TO_COURSE = "add_designer_to_course"
    REMOVE_DESIGNER_FROM_COURSE = "remove_designer_from_course"
    ADD_OBSERVER_TO_COURSE = "add_observer_to_course"
    REMOVE_OBSERVER_FROM_COURSE = "remove_observer_from_course"
    ADD_STUDENT_TO_COURSE = "add_student_to_course"
    REMOVE_STUDENT_FROM_COURSE = "remove_student_from_course"
    VIEW_ALL_GRADES = "view_all_grades"
    VIEW_ANALYTICS = "view_analytics"
    VIEW_AUDIT_TRAIL = "view_audit_trail"
    VIEW_GROUP_PAGES = "view_group_pages"
    VIEW_USER_LOGINS = "view_user_logins"
