"""AWS infrastructure implementations package."""

from campus.infrastructure.implementations.aws.course_repository import (
    AWSCourseRepository,
)
from campus.infrastructure.implementations.aws.student_repository import (
    AWSStudentRepository,
)

__all__ = [
    "AWSCourseRepository",
    "AWSStudentRepository",
]
