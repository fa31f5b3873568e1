"""
Models package.

Contains shared Pydantic models used across multiple modules.
Module-specific models are located in their respective module directories.
"""

from campus.models.errors import ProblemDetail, ValidationErrorDetail
from campus.models.pagination import PageRequest, PageResponse, SortDirection

__all__ = [
    # Pagination
    "PageRequest",
    "PageResponse",
    "SortDirection",
    # RFC 7807 Error models
    "ProblemDetail",
    "ValidationErrorDetail",
]
