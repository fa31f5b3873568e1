"""
Student service.

Validates student input, builds Student records and maps them to
responses. The CRUD and pagination workflow comes from RecordService.
"""

from campus.api.v1.students.request import StudentRequest
from campus.api.v1.students.response import StudentResponse
from campus.domain.exceptions import ValidationFailedError
from campus.domain.services.record_service import RecordService, blank_field_errors
from campus.infrastructure.repositories.student_repository import Student


class StudentService(RecordService[Student, StudentRequest, StudentResponse]):
    """Service for student management."""

    kind = "Student"
    response_model = StudentResponse

    def _build_record(self, request: StudentRequest) -> Student:
        errors = blank_field_errors(
            {
                "title": request.title,
                "name": request.name,
                "address": request.address,
                "city": request.city,
                "course": request.course,
            }
        )
        if errors:
            raise ValidationFailedError(errors)

        return Student(
            title=request.title,
            name=request.name,
            address=request.address,
            city=request.city,
            course=request.course,
        )

    def _to_response(self, record: Student) -> StudentResponse:
        return StudentResponse(
            id=record.id,
            title=record.title,
            name=record.name,
            address=record.address,
            city=record.city,
            course=record.course,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


__all__ = ["StudentService"]
