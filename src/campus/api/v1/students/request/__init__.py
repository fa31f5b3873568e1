"""Student Request Models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StudentRequest(BaseModel):
    """
    Request to create or replace a student.

    Blank values are rejected by StudentService, which reports every
    blank field at once.

    Attributes:
        title: Form of address
        name: Full name
        address: Street address
        city: City
        course: Course reference
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Mr",
                "name": "Ann",
                "address": "1 Rd",
                "city": "X",
                "course": "CS101",
            }
        },
    )

    title: str = Field(..., description="Form of address (Mr, Ms, Dr, ...)")
    name: str = Field(..., description="Full name")
    address: str = Field(..., description="Street address")
    city: str = Field(..., description="City")
    course: str = Field(..., description="Course reference")
