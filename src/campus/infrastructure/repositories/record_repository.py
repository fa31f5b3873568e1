"""
Abstract interface for record storage.

Every collection (students, courses) is a set of documents keyed by a
string id. Implementations translate these operations into calls against
a concrete document store:
- Persisting records and stamping id/timestamps on save
- Lookup by id, with absence reported as None rather than an error
- Full listing, equality filtering and sorted/paginated listing
- Counting and deletion
"""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar

from pydantic.alias_generators import to_snake

from campus.models.pagination import PageRequest


@dataclass(kw_only=True)
class Record:
    """
    Fields shared by every persisted record.

    Attributes:
        id: Document key, assigned on first save and never changed
        created_at: Set on first save only
        updated_at: Set on every save
    """

    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


R = TypeVar("R", bound=Record)


def field_names(record_type: type[Record]) -> set[str]:
    """Attribute names of a record dataclass."""
    return {f.name for f in fields(record_type)}


def resolve_field(record_type: type[Record], name: str) -> str | None:
    """
    Map an external field name (camelCase or snake_case) to a record attribute.

    Returns:
        The attribute name, or None if the record has no such field
    """
    attribute = to_snake(name)
    return attribute if attribute in field_names(record_type) else None


class RecordRepository(ABC, Generic[R]):
    """
    Abstract interface for record storage operations.

    Subclasses bind ``record_type`` and ``collection_name``; implementations
    provide the storage calls.
    """

    record_type: ClassVar[type[Record]]
    collection_name: ClassVar[str]

    def _stamp_for_save(self, record: R) -> None:
        """
        Assign id and timestamps before a write.

        A record without id gets a fresh uuid4 and created_at; every save
        refreshes updated_at. Both timestamps of a new record come from the
        same clock reading.
        """
        now = datetime.now(UTC)
        if not record.id:
            record.id = str(uuid.uuid4())
            record.created_at = now
        record.updated_at = now

    def _sort_and_slice(self, records: list[R], page_request: PageRequest) -> list[R]:
        """
        Sort records by the requested field and cut out the requested page.

        Raises:
            ValueError: If the sort field is not a field of the record type
        """
        attribute = resolve_field(self.record_type, page_request.sort_by)
        if attribute is None:
            raise ValueError(f"Unknown sort field: {page_request.sort_by}")

        def sort_key(record: R) -> tuple[bool, Any]:
            value = getattr(record, attribute)
            return (value is not None, value)

        ordered = sorted(records, key=sort_key, reverse=page_request.descending)
        start = page_request.offset
        return ordered[start : start + page_request.size]

    @abstractmethod
    async def save(self, record: R) -> str:
        """
        Store a record, overwriting any previous document with the same id.

        Args:
            record: Record to persist; id and timestamps are stamped in place

        Returns:
            The record id

        Raises:
            Exception: If the storage operation fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, record_id: str) -> R | None:
        """
        Retrieve a record by id.

        Args:
            record_id: Document key

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[R]:
        """
        List every record in the collection, in store-native order.

        Returns:
            List of all records
        """
        pass

    @abstractmethod
    async def find_all_with_pagination(self, page_request: PageRequest) -> list[R]:
        """
        List one page of records.

        Args:
            page_request: Page index, size and sort order

        Returns:
            At most ``page_request.size`` records, after skipping
            ``page * size`` records of the sorted collection
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """
        Count records in the collection.

        Returns:
            Number of stored records
        """
        pass

    @abstractmethod
    async def delete_by_id(self, record_id: str) -> None:
        """
        Delete a record. Deleting a missing id is not an error.

        Args:
            record_id: Document key
        """
        pass

    @abstractmethod
    async def exists_by_id(self, record_id: str) -> bool:
        """
        Check whether a record exists.

        Args:
            record_id: Document key

        Returns:
            True if a document is stored under the id
        """
        pass

    @abstractmethod
    async def find_by_field(self, name: str, value: Any) -> list[R]:
        """
        List records whose field equals a value.

        Args:
            name: Field name (camelCase or snake_case)
            value: Value to match

        Returns:
            Matching records

        Raises:
            ValueError: If the field is not a field of the record type
        """
        pass
