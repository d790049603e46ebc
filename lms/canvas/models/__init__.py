"""Data models for Canvas records.

Architecture:
    Pydantic v2 models decoded straight from response bodies. All models are
    immutable (frozen=True) and ignore fields they do not declare, so new
    server-side fields never break decoding.

Model Categories:
    - Courses: Course, Term, CourseProgress, CalendarLink, GradingPeriod,
      BlueprintRestrictions
    - Users: User, UserDisplay, AnonymousUserDisplay
    - Enrollments: Enrollment, Grade
"""

from .blueprint import BlueprintRestrictions
from .course import CalendarLink, Course, CourseProgress, Term
from .enrollment import Enrollment, Grade
from .grading_period import GradingPeriod
from .timestamps import OptionalTimestamp
from .user import AnonymousUserDisplay, User, UserDisplay

__all__ = [
    "AnonymousUserDisplay",
    "BlueprintRestrictions",
    "CalendarLink",
    "Course",
    "CourseProgress",
    "Enrollment",
    "Grade",
    "GradingPeriod",
    "OptionalTimestamp",
    "Term",
    "User",
    "UserDisplay",
]
