"""AWS DynamoDB course repository using PynamoDB ORM."""

from decimal import Decimal

from pynamodb.attributes import UnicodeAttribute, UTCDateTimeAttribute
from pynamodb.models import Model

from campus.infrastructure.implementations.aws.record_repository import (
    AWSRecordRepository,
)
from campus.infrastructure.repositories.course_repository import (
    Course,
    CourseRepository,
)


class CourseModel(Model):
    """PynamoDB model for course storage.

    DynamoDB Table Schema:
    - Partition Key: id (string)
    - Attributes: name, fee, lecturer_id, lecturer_name, created_at, updated_at

    The fee is a string attribute holding the decimal text; DynamoDB numbers
    would drop trailing zeros ("150.00" would read back as "150").

    Note: table_name and region are configured in AWSCourseRepository.__init__
    """

    class Meta:
        table_name = None
        region = None

    id = UnicodeAttribute(hash_key=True)

    name = UnicodeAttribute()
    fee = UnicodeAttribute()
    lecturer_id = UnicodeAttribute()
    lecturer_name = UnicodeAttribute()
    created_at = UTCDateTimeAttribute()
    updated_at = UTCDateTimeAttribute()


class AWSCourseRepository(AWSRecordRepository[Course], CourseRepository):
    """Courses stored in a DynamoDB table."""

    model_class = CourseModel

    def _record_to_model(self, record: Course) -> CourseModel:
        """Convert Course to PynamoDB model."""
        return CourseModel(
            record.id,
            name=record.name,
            fee=str(record.fee),
            lecturer_id=record.lecturer_id,
            lecturer_name=record.lecturer_name,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def _model_to_record(self, model: CourseModel) -> Course:
        """Convert PynamoDB model to Course."""
        return Course(
            id=model.id,
            name=model.name,
            fee=Decimal(model.fee),
            lecturer_id=model.lecturer_id,
            lecturer_name=model.lecturer_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
