"""Resource handlers grouping Canvas endpoints by resource."""

from .courses import CourseHandler
from .users import UserHandler

__all__ = ["CourseHandler", "UserHandler"]
