"""Local file-based infrastructure implementations for development."""

from campus.infrastructure.implementations.local.course_repository import (
    LocalCourseRepository,
)
from campus.infrastructure.implementations.local.student_repository import (
    LocalStudentRepository,
)

__all__ = [
    "LocalCourseRepository",
    "LocalStudentRepository",
]
