"""Local file-based student repository."""

from datetime import datetime
from typing import Any

from campus.infrastructure.implementations.local.record_repository import (
    LocalRecordRepository,
)
from campus.infrastructure.repositories.student_repository import (
    Student,
    StudentRepository,
)


class LocalStudentRepository(LocalRecordRepository[Student], StudentRepository):
    """Students stored as JSON files under ``{base_dir}/students``."""

    def _record_to_dict(self, record: Student) -> dict[str, Any]:
        """Convert Student to JSON-serializable dict."""
        return {
            "id": record.id,
            "title": record.title,
            "name": record.name,
            "address": record.address,
            "city": record.city,
            "course": record.course,
            "created_at": record.created_at.isoformat(),
            "updated_at": record.updated_at.isoformat(),
        }

    def _dict_to_record(self, data: dict[str, Any]) -> Student:
        """Convert dict to Student."""
        return Student(
            id=data["id"],
            title=data["title"],
            name=data["name"],
            address=data["address"],
            city=data["city"],
            course=data["course"],
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )
