"""Error response models following RFC 7807 Problem Details."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

# RFC status code to section mapping
status_to_section: dict[int, str] = {
    400: "6.5.1",
    404: "6.5.4",
    405: "6.5.5",
    409: "6.5.8",
    422: "https://datatracker.ietf.org/doc/html/rfc4918#section-11.2",
    500: "6.6.1",
    502: "6.6.3",
    503: "6.6.4",
}


def get_rfc_section_url(status: int) -> str:
    """Get the RFC section URL for a given HTTP status code.

    Args:
        status: The HTTP status code.

    Returns:
        The URL to the corresponding section in the RFC.
    """
    base_url = "https://datatracker.ietf.org/doc/html/rfc7231#section-"
    section = status_to_section.get(status)
    if section is None:
        return f"{base_url}6.6.1"  # Default to 500 Internal Server Error
    if section.startswith("https://"):
        return section
    return f"{base_url}{section}"


class ValidationErrorDetail(BaseModel):
    """Validation error detail for a specific field.

    Attributes:
        type: Error type (e.g., "value_error", "missing").
        loc: Location of the error in the request (e.g., ["body", "fee"]).
        msg: Human-readable error message.
        input: The invalid input value that caused the error.
        ctx: Additional context about the error (optional).
    """

    type: str = Field(..., description="Error type")
    loc: tuple[str, ...] = Field(..., description="Error location in request")
    msg: str = Field(..., description="Human-readable error message")
    input: Any = Field(None, description="Invalid input value")
    ctx: dict[str, Any] | None = Field(None, description="Additional error context")


class ProblemDetail(BaseModel):
    """Problem Detail response as defined in RFC 7807.

    Provides standardized error responses across all API endpoints.

    Example:
        ```python
        problem = ProblemDetail(
            title="Not Found",
            status=404,
            detail="Student not found with id: 42",
            instance="/api/v1/students/42",
        )
        ```
    """

    type: str | None = Field(
        default=None,
        description="URI reference to the problem type (RFC 7807)",
        json_schema_extra={
            "example": "https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.4"
        },
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        json_schema_extra={"example": "Not Found"},
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        json_schema_extra={"example": 404},
    )
    detail: str | None = Field(
        default=None,
        description="Human-readable explanation",
        json_schema_extra={"example": "Course not found with id: 42"},
    )
    instance: str | None = Field(
        default=None,
        description="URI reference identifying this occurrence",
        json_schema_extra={"example": "/api/v1/courses/42"},
    )
    errors: list[ValidationErrorDetail] | None = Field(
        default=None,
        description="Validation errors (for 400 responses)",
        json_schema_extra={
            "example": [
                {
                    "type": "value_error",
                    "loc": ["body", "fee"],
                    "msg": "Fee must be a non-negative decimal",
                    "input": "-5",
                }
            ]
        },
    )

    @model_validator(mode="before")
    @classmethod
    def set_default_type(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Set the default type based on the status if not provided.

        Args:
            values: The model values.

        Returns:
            Updated values with type set.
        """
        if "type" not in values or values["type"] is None:
            status = values.get("status", 500)
            values["type"] = get_rfc_section_url(status)
        return values
