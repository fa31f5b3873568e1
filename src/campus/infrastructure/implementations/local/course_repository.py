"""Local file-based course repository."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from campus.infrastructure.implementations.local.record_repository import (
    LocalRecordRepository,
)
from campus.infrastructure.repositories.course_repository import (
    Course,
    CourseRepository,
)


class LocalCourseRepository(LocalRecordRepository[Course], CourseRepository):
    """
    Courses stored as JSON files under ``{base_dir}/courses``.

    The fee is written as its decimal string so it reads back unchanged.
    """

    def _record_to_dict(self, record: Course) -> dict[str, Any]:
        """Convert Course to JSON-serializable dict."""
        return {
            "id": record.id,
            "name": record.name,
            "fee": str(record.fee),
            "lecturer_id": record.lecturer_id,
            "lecturer_name": record.lecturer_name,
            "created_at": record.created_at.isoformat(),
            "updated_at": record.updated_at.isoformat(),
        }

    def _dict_to_record(self, data: dict[str, Any]) -> Course:
        """Convert dict to Course."""
        return Course(
            id=data["id"],
            name=data["name"],
            fee=Decimal(data["fee"]),
            lecturer_id=data["lecturer_id"],
            lecturer_name=data["lecturer_name"],
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )
