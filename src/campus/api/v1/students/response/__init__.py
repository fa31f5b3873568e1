"""Student Response Models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StudentResponse(BaseModel):
    """Stored student as returned to clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Student identifier")
    title: str = Field(..., description="Form of address")
    name: str = Field(..., description="Full name")
    address: str = Field(..., description="Street address")
    city: str = Field(..., description="City")
    course: str = Field(..., description="Course reference")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    updated_at: datetime = Field(..., description="Last update timestamp (UTC)")
