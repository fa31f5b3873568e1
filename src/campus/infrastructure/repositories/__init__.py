"""Abstract repository interfaces for record storage."""

from campus.infrastructure.repositories.course_repository import (
    Course,
    CourseRepository,
)
from campus.infrastructure.repositories.record_repository import (
    Record,
    RecordRepository,
)
from campus.infrastructure.repositories.student_repository import (
    Student,
    StudentRepository,
)

__all__ = [
    "Course",
    "CourseRepository",
    "Record",
    "RecordRepository",
    "Student",
    "StudentRepository",
]
