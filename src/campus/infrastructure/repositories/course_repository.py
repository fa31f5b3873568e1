"""Course record and repository interface."""

from abc import ABC
from dataclasses import dataclass
from decimal import Decimal

from campus.infrastructure.repositories.record_repository import (
    Record,
    RecordRepository,
)


@dataclass(kw_only=True)
class Course(Record):
    """
    Course record.

    Attributes:
        name: Course name
        fee: Non-negative course fee
        lecturer_id: Identifier of the lecturer
        lecturer_name: Display name of the lecturer
    """

    name: str
    fee: Decimal
    lecturer_id: str
    lecturer_name: str


class CourseRepository(RecordRepository[Course], ABC):
    """
    Abstract interface for the courses collection.

    Adds lecturer and name lookups on top of the generic operations.
    """

    record_type = Course
    collection_name = "courses"

    async def find_by_lecturer_id(self, lecturer_id: str) -> list[Course]:
        """List courses taught by a lecturer."""
        return await self.find_by_field("lecturer_id", lecturer_id)

    async def find_by_name(self, name: str) -> list[Course]:
        """List courses with an exact name."""
        return await self.find_by_field("name", name)
