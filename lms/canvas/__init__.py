"""Canvas LMS client - typed, lazily paginated access to the Canvas REST API."""

from .clients import Canvas
from .config import CanvasConfig
from .core import (
    AvatarState,
    CanvasError,
    ConfigurationError,
    CourseFormat,
    DecodeError,
    EnrollmentState,
    EnrollmentType,
    FetchError,
    FetchResult,
    GradePassbackSetting,
    PageLimitExceededError,
    PageType,
    PaginationError,
    PaginationFormatError,
    Permission,
    TransportError,
    WorkflowState,
)
from .models import (
    AnonymousUserDisplay,
    BlueprintRestrictions,
    CalendarLink,
    Course,
    CourseProgress,
    Enrollment,
    Grade,
    GradingPeriod,
    Term,
    User,
    UserDisplay,
)
from .runtime.rest import PaginatedSequence, PaginationInfo, paginate, parse_link_header

__version__ = "0.1.0"

__all__ = [
    # Client
    "Canvas",
    "CanvasConfig",
    # Pagination
    "PaginatedSequence",
    "PaginationInfo",
    "FetchResult",
    "paginate",
    "parse_link_header",
    # Models
    "AnonymousUserDisplay",
    "BlueprintRestrictions",
    "CalendarLink",
    "Course",
    "CourseProgress",
    "Enrollment",
    "Grade",
    "GradingPeriod",
    "Term",
    "User",
    "UserDisplay",
    # Enums
    "AvatarState",
    "CourseFormat",
    "EnrollmentState",
    "EnrollmentType",
    "GradePassbackSetting",
    "PageType",
    "Permission",
    "WorkflowState",
    # Exceptions
    "CanvasError",
    "ConfigurationError",
    "DecodeError",
    "FetchError",
    "PageLimitExceededError",
    "PaginationError",
    "PaginationFormatError",
    "TransportError",
]
