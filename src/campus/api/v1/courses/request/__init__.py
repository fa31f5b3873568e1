"""Course Request Models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CourseRequest(BaseModel):
    """
    Request to create or replace a course.

    The fee is sent as a decimal string ("150.00") and parsed by
    CourseService, so malformed or negative fees are reported alongside
    blank fields.

    Attributes:
        name: Course name
        fee: Course fee as a decimal string
        lecturer_id: Lecturer identifier
        lecturer_name: Lecturer display name
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Distributed Systems",
                "fee": "150.00",
                "lecturerId": "L-001",
                "lecturerName": "Dr. Grace Hopper",
            }
        },
    )

    name: str = Field(..., description="Course name")
    fee: str = Field(..., description="Course fee as a decimal string")
    lecturer_id: str = Field(..., description="Lecturer identifier")
    lecturer_name: str = Field(..., description="Lecturer display name")
