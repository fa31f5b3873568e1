"""Student record and repository interface."""

from abc import ABC
from dataclasses import dataclass

from campus.infrastructure.repositories.record_repository import (
    Record,
    RecordRepository,
)


@dataclass(kw_only=True)
class Student(Record):
    """
    Student record.

    Attributes:
        title: Form of address (Mr, Ms, Dr, ...)
        name: Full name
        address: Street address
        city: City
        course: Reference to a course, not enforced by the store
    """

    title: str
    name: str
    address: str
    city: str
    course: str


class StudentRepository(RecordRepository[Student], ABC):
    """Abstract interface for the students collection."""

    record_type = Student
    collection_name = "students"
