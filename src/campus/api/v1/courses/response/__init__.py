"""Course Response Models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CourseResponse(BaseModel):
    """Stored course as returned to clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Course identifier")
    name: str = Field(..., description="Course name")
    fee: str = Field(..., description="Course fee as a decimal string")
    lecturer_id: str = Field(..., description="Lecturer identifier")
    lecturer_name: str = Field(..., description="Lecturer display name")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    updated_at: datetime = Field(..., description="Last update timestamp (UTC)")
