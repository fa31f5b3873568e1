"""AWS DynamoDB student repository using PynamoDB ORM."""

from pynamodb.attributes import UnicodeAttribute, UTCDateTimeAttribute
from pynamodb.models import Model

from campus.infrastructure.implementations.aws.record_repository import (
    AWSRecordRepository,
)
from campus.infrastructure.repositories.student_repository import (
    Student,
    StudentRepository,
)


class StudentModel(Model):
    """PynamoDB model for student storage.

    DynamoDB Table Schema:
    - Partition Key: id (string)
    - Attributes: title, name, address, city, course, created_at, updated_at

    Note: table_name and region are configured in AWSStudentRepository.__init__
    """

    class Meta:
        table_name = None
        region = None

    id = UnicodeAttribute(hash_key=True)

    title = UnicodeAttribute()
    name = UnicodeAttribute()
    address = UnicodeAttribute()
    city = UnicodeAttribute()
    course = UnicodeAttribute()
    created_at = UTCDateTimeAttribute()
    updated_at = UTCDateTimeAttribute()


class AWSStudentRepository(AWSRecordRepository[Student], StudentRepository):
    """Students stored in a DynamoDB table."""

    model_class = StudentModel

    def _record_to_model(self, record: Student) -> StudentModel:
        """Convert Student to PynamoDB model."""
        return StudentModel(
            record.id,
            title=record.title,
            name=record.name,
            address=record.address,
            city=record.city,
            course=record.course,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def _model_to_record(self, model: StudentModel) -> Student:
        """Convert PynamoDB model to Student."""
        return Student(
            id=model.id,
            title=model.title,
            name=model.name,
            address=model.address,
            city=model.city,
            course=model.course,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
