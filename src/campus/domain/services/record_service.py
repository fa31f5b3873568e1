"""
Base class for record services.

This module implements the workflow shared by every collection: create,
read, update, delete and paginated listing on top of a RecordRepository.
Subclasses supply input validation, record construction and response
mapping.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from campus.core.logging import logger
from campus.domain.exceptions import FieldError, NotFoundError, ValidationFailedError
from campus.infrastructure.repositories.record_repository import (
    R,
    RecordRepository,
    resolve_field,
)
from campus.models.pagination import PageRequest, PageResponse

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


def blank_field_errors(values: dict[str, str | None]) -> list[FieldError]:
    """
    Report every required text field that is missing or whitespace only.

    Args:
        values: Wire field name to submitted value

    Returns:
        One FieldError per blank field
    """
    return [
        FieldError(field=field, reason=f"{field} is required", value=value)
        for field, value in values.items()
        if value is None or not value.strip()
    ]


class RecordService(ABC, Generic[R, RequestT, ResponseT]):
    """
    Base class for record services.

    The service never caches records: every operation reads from the
    repository. Absence from the repository is turned into NotFoundError
    here; any other repository failure propagates unchanged.
    """

    kind: ClassVar[str]
    response_model: ClassVar[type[BaseModel]]

    def __init__(self, repository: RecordRepository[R]):
        """
        Initialize the service.

        Args:
            repository: Repository for the collection this service manages
        """
        self.repository = repository

    @abstractmethod
    def _build_record(self, request: RequestT) -> R:
        """
        Validate a request and build an unsaved record from it.

        Raises:
            ValidationFailedError: If any field is invalid
        """

    @abstractmethod
    def _to_response(self, record: R) -> ResponseT:
        """Map a stored record to its response model."""

    async def _get_existing(self, record_id: str) -> R:
        record = await self.repository.find_by_id(record_id)
        if record is None:
            raise NotFoundError(self.kind, record_id)
        return record

    async def _reload(self, record_id: str) -> ResponseT:
        # Respond with what the store holds, including its timestamps
        return self._to_response(await self._get_existing(record_id))

    async def create(self, request: RequestT) -> ResponseT:
        """
        Create a record.

        Args:
            request: Validated-by-type input model

        Returns:
            The stored record as a response model

        Raises:
            ValidationFailedError: If input is invalid; nothing is written
        """
        record = self._build_record(request)
        record_id = await self.repository.save(record)

        logger.info(f"Created {self.kind} {record_id}")
        return await self._reload(record_id)

    async def get_by_id(self, record_id: str) -> ResponseT:
        """
        Get one record.

        Raises:
            NotFoundError: If no record has this id
        """
        return self._to_response(await self._get_existing(record_id))

    async def get_all(self) -> list[ResponseT]:
        """Get every record, unpaginated."""
        records = await self.repository.find_all()
        return [self._to_response(record) for record in records]

    async def get_all_with_pagination(
        self, page_request: PageRequest
    ) -> PageResponse[ResponseT]:
        """
        Get one page of records with pagination metadata.

        The page slice and the total count are read concurrently. Either
        read failing cancels the other and fails the whole call with the
        first store error. The two reads are not isolated from concurrent
        writes, so the count may be off by in-flight inserts or deletes.

        Raises:
            ValidationFailedError: If sort_by names no field of the record
        """
        if resolve_field(self.repository.record_type, page_request.sort_by) is None:
            raise ValidationFailedError.single(
                "sortBy",
                f"Unsupported sort field for {self.kind}",
                page_request.sort_by,
                location="query",
            )

        logger.debug(
            f"Listing {self.kind} page={page_request.page} size={page_request.size} "
            f"sort={page_request.sort_by} {page_request.sort_direction.value}"
        )

        try:
            async with asyncio.TaskGroup() as group:
                page_read = group.create_task(
                    self.repository.find_all_with_pagination(page_request)
                )
                count_read = group.create_task(self.repository.count())
        except ExceptionGroup as failure:
            raise failure.exceptions[0] from None

        records, total = page_read.result(), count_read.result()

        content = [self._to_response(record) for record in records]
        return PageResponse[self.response_model].of(content, page_request, total)

    async def update(self, record_id: str, request: RequestT) -> ResponseT:
        """
        Replace every field of a record except its id and created_at.

        Raises:
            NotFoundError: If no record has this id
            ValidationFailedError: If input is invalid; nothing is written
        """
        existing = await self._get_existing(record_id)

        record = self._build_record(request)
        record.id = existing.id
        record.created_at = existing.created_at
        await self.repository.save(record)

        logger.info(f"Updated {self.kind} {record_id}")
        return await self._reload(record_id)

    async def delete(self, record_id: str) -> None:
        """
        Delete a record.

        Raises:
            NotFoundError: If no record has this id
        """
        await self._get_existing(record_id)
        await self.repository.delete_by_id(record_id)

        logger.info(f"Deleted {self.kind} {record_id}")
