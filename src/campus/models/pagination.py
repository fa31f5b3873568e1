"""
Pagination models shared by every paginated listing.

PageRequest describes the slice a caller wants; PageResponse is the
envelope returned with the slice and its metadata. The envelope arithmetic
lives in ``PageResponse.of`` and is the same for every record type.
"""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
DEFAULT_SORT_BY = "createdAt"


class SortDirection(str, Enum):
    """Sort order for paginated listings."""

    ASC = "ASC"
    DESC = "DESC"


class PageRequest(BaseModel):
    """
    A (page, size, sort field, sort direction) tuple.

    Attributes:
        page: Zero-based page index
        size: Maximum number of items per page
        sort_by: Field to sort by (camelCase or snake_case)
        sort_direction: ASC or DESC
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    page: int = Field(default=0, ge=0, description="Zero-based page index")
    size: int = Field(
        default=DEFAULT_PAGE_SIZE, ge=1, description="Number of items per page"
    )
    sort_by: str = Field(default=DEFAULT_SORT_BY, description="Field to sort by")
    sort_direction: SortDirection = Field(
        default=SortDirection.DESC, description="Sort direction"
    )

    @property
    def offset(self) -> int:
        """Number of records to skip before this page starts."""
        return self.page * self.size

    @property
    def descending(self) -> bool:
        return self.sort_direction == SortDirection.DESC


class PageResponse(BaseModel, Generic[T]):
    """
    Page envelope: the items of one page plus pagination metadata.

    Example:
        {
            "content": [...],
            "currentPage": 0,
            "pageSize": 10,
            "totalElements": 25,
            "totalPages": 3,
            "first": true,
            "last": false,
            "hasNext": true,
            "hasPrevious": false
        }
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: list[T] = Field(default_factory=list, description="Items in this page")
    current_page: int = Field(..., description="Zero-based index of this page")
    page_size: int = Field(..., description="Requested page size")
    total_elements: int = Field(..., description="Total records in the collection")
    total_pages: int = Field(..., description="Number of pages at this page size")
    first: bool = Field(..., description="Whether this is the first page")
    last: bool = Field(..., description="Whether this is the last page")
    has_next: bool = Field(..., description="Whether a following page exists")
    has_previous: bool = Field(..., description="Whether a preceding page exists")

    @classmethod
    def of(
        cls, content: list[T], page_request: PageRequest, total_elements: int
    ) -> "PageResponse[T]":
        """
        Build the envelope for a page.

        A page past the end is not an error: it yields empty content with
        metadata derived from the same formulas.

        Args:
            content: Items of the requested page (at most page_request.size)
            page_request: The request that produced the items
            total_elements: Total number of records in the collection

        Returns:
            PageResponse with computed metadata
        """
        size = page_request.size
        total_pages = (total_elements + size - 1) // size
        is_first = page_request.page == 0
        is_last = page_request.page >= total_pages - 1

        return cls(
            content=content,
            current_page=page_request.page,
            page_size=size,
            total_elements=total_elements,
            total_pages=total_pages,
            first=is_first,
            last=is_last,
            has_next=not is_last and total_elements > 0,
            has_previous=not is_first,
        )
