"""
Domain exceptions raised by services.

Handlers in ``campus.exception_handlers`` translate them into RFC 7807
responses: NotFoundError → 404, ValidationFailedError → 400.
"""

from dataclasses import dataclass


class DomainError(Exception):
    """Base class for errors the API reports to callers."""


class NotFoundError(DomainError):
    """A lookup by id found nothing."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found with id: {record_id}")


@dataclass(frozen=True)
class FieldError:
    """A single invalid input field.

    ``location`` is the request part the field came from ("body" or "query").
    """

    field: str
    reason: str
    value: object = None
    location: str = "body"


class ValidationFailedError(DomainError):
    """Input failed domain validation; carries one entry per bad field."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        fields = ", ".join(error.field for error in errors)
        super().__init__(f"Validation failed for: {fields}")

    @classmethod
    def single(
        cls, field: str, reason: str, value: object = None, location: str = "body"
    ) -> "ValidationFailedError":
        return cls(
            [FieldError(field=field, reason=reason, value=value, location=location)]
        )
