"""Core components."""

from .enums import (
    AvatarState,
    CourseFormat,
    EnrollmentState,
    EnrollmentType,
    GradePassbackSetting,
    PageType,
    Permission,
    WorkflowState,
)
from .exceptions import (
    CanvasError,
    ConfigurationError,
    DecodeError,
    FetchError,
    PageLimitExceededError,
    PaginationError,
    PaginationFormatError,
    TransportError,
)
from .result import FetchResult

__all__ = [
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
    # Results
    "FetchResult",
]
