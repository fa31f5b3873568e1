"""
Course service.

Validates course input (including fee parsing), builds Course records and
maps them to responses. Adds lecturer and name lookups to the
RecordService workflow.
"""

import re
from decimal import Decimal

from campus.api.v1.courses.request import CourseRequest
from campus.api.v1.courses.response import CourseResponse
from campus.core.logging import logger
from campus.domain.exceptions import FieldError, ValidationFailedError
from campus.domain.services.record_service import RecordService, blank_field_errors
from campus.infrastructure.repositories.course_repository import (
    Course,
    CourseRepository,
)

FEE_ERROR = "fee must be a non-negative decimal number"

# ASCII digits only, no sign other than "+", no digit separators
FEE_PATTERN = re.compile(r"\+?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")


def parse_fee(value: str) -> Decimal:
    """
    Parse a fee string into a Decimal, keeping its scale ("150.00" stays "150.00").

    Text that Decimal would coerce (digit separators, non-ASCII digits,
    "-0", NaN, Infinity) is rejected rather than normalised.

    Raises:
        ValueError: If the value is not a plain non-negative decimal
    """
    text = value.strip()
    if not FEE_PATTERN.fullmatch(text):
        raise ValueError(FEE_ERROR)
    return Decimal(text)


class CourseService(RecordService[Course, CourseRequest, CourseResponse]):
    """Service for course management."""

    kind = "Course"
    response_model = CourseResponse

    def __init__(self, repository: CourseRepository):
        super().__init__(repository)
        self.repository: CourseRepository = repository

    def _build_record(self, request: CourseRequest) -> Course:
        errors = blank_field_errors(
            {
                "name": request.name,
                "fee": request.fee,
                "lecturerId": request.lecturer_id,
                "lecturerName": request.lecturer_name,
            }
        )

        fee = None
        if not any(error.field == "fee" for error in errors):
            try:
                fee = parse_fee(request.fee)
            except ValueError as e:
                errors.append(FieldError(field="fee", reason=str(e), value=request.fee))

        if errors:
            raise ValidationFailedError(errors)

        return Course(
            name=request.name,
            fee=fee,
            lecturer_id=request.lecturer_id,
            lecturer_name=request.lecturer_name,
        )

    def _to_response(self, record: Course) -> CourseResponse:
        return CourseResponse(
            id=record.id,
            name=record.name,
            fee=str(record.fee),
            lecturer_id=record.lecturer_id,
            lecturer_name=record.lecturer_name,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def get_by_lecturer(self, lecturer_id: str) -> list[CourseResponse]:
        """List courses taught by a lecturer."""
        courses = await self.repository.find_by_lecturer_id(lecturer_id)
        logger.debug(f"Found {len(courses)} courses for lecturer {lecturer_id}")
        return [self._to_response(course) for course in courses]

    async def get_by_name(self, name: str) -> list[CourseResponse]:
        """List courses with an exact name."""
        courses = await self.repository.find_by_name(name)
        return [self._to_response(course) for course in courses]


__all__ = ["CourseService", "parse_fee"]
