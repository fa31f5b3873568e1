"""
AWS DynamoDB implementation for record storage using PynamoDB ORM.

Each collection lives in its own table keyed by ``id``. DynamoDB cannot
sort a scan or skip an offset, so paginated listings scan the table and
sort in memory. PynamoDB is blocking; every call runs in a worker thread
so concurrent reads from one request overlap.
"""

import asyncio
from abc import abstractmethod
from typing import Any

from pynamodb.exceptions import DoesNotExist
from pynamodb.models import Model

from campus.core.logging import logger
from campus.infrastructure.repositories.record_repository import (
    R,
    RecordRepository,
    resolve_field,
)
from campus.models.pagination import PageRequest


class AWSRecordRepository(RecordRepository[R]):
    """AWS DynamoDB implementation of RecordRepository using PynamoDB.

    Subclasses bind ``model_class`` and the record/model converters.

    Environment Variables:
    - AWS_REGION: AWS region
    - AWS_ACCESS_KEY_ID: AWS access key (optional if using IAM role)
    - AWS_SECRET_ACCESS_KEY: AWS secret key (optional if using IAM role)
    """

    model_class: type[Model]

    def __init__(
        self,
        table_name: str,
        region_name: str = "eu-west-1",
        host: str | None = None,
        auto_create_table: bool = False,
    ):
        """Configure the PynamoDB model for this repository.

        Args:
            table_name: DynamoDB table name
            region_name: AWS region
            host: Custom endpoint (DynamoDB Local), None for AWS
            auto_create_table: If True, create table if it doesn't exist
        """
        if not table_name:
            raise ValueError("table_name cannot be empty")
        if not region_name:
            raise ValueError("region_name cannot be empty")

        self.model_class.Meta.table_name = table_name
        self.model_class.Meta.region = region_name
        self.model_class.Meta.host = host

        self.table_name = table_name
        self.region_name = region_name

        if auto_create_table:
            self._ensure_table_exists()

        logger.info(
            f"Initialized {type(self).__name__} (PynamoDB) with table={table_name}, region={region_name}"
        )

    def _ensure_table_exists(self) -> None:
        """Create DynamoDB table if it doesn't exist."""
        try:
            if not self.model_class.exists():
                logger.info(f"Creating DynamoDB table: {self.table_name}")

                self.model_class.create_table(
                    read_capacity_units=5,
                    write_capacity_units=5,
                    wait=True,
                )

                logger.info(f"Table {self.table_name} created successfully")
            else:
                logger.debug(f"Table {self.table_name} already exists")

        except Exception as e:
            logger.error(f"Failed to create table: {e}")
            raise

    @abstractmethod
    def _record_to_model(self, record: R) -> Model:
        """Convert a record to a PynamoDB model instance."""

    @abstractmethod
    def _model_to_record(self, model: Model) -> R:
        """Convert a PynamoDB model instance to a record."""

    def _get_or_none(self, record_id: str) -> Model | None:
        try:
            return self.model_class.get(record_id)
        except DoesNotExist:
            return None

    def _scan_records(self, *conditions: Any) -> list[R]:
        return [
            self._model_to_record(model)
            for model in self.model_class.scan(*conditions)
        ]

    def _count_items(self) -> int:
        # Table-level ItemCount is refreshed only every few hours, so scan keys
        return sum(1 for _ in self.model_class.scan(attributes_to_get=["id"]))

    async def save(self, record: R) -> str:
        """Save record to DynamoDB."""
        self._stamp_for_save(record)

        try:
            await asyncio.to_thread(self._record_to_model(record).save)
        except Exception as e:
            logger.error(f"Failed to save {self.collection_name} record {record.id}: {e}")
            raise

        logger.debug(f"Saved {self.collection_name} record {record.id}")
        return record.id

    async def find_by_id(self, record_id: str) -> R | None:
        """Get a record by id, None if absent."""
        try:
            model = await asyncio.to_thread(self._get_or_none, record_id)
        except Exception as e:
            logger.error(f"Failed to get {self.collection_name} record {record_id}: {e}")
            raise

        return self._model_to_record(model) if model is not None else None

    async def find_all(self) -> list[R]:
        """Scan every record in the table."""
        try:
            records = await asyncio.to_thread(self._scan_records)
        except Exception as e:
            logger.error(f"Failed to list {self.collection_name}: {e}")
            raise

        logger.debug(f"Retrieved {len(records)} {self.collection_name} records")
        return records

    async def find_all_with_pagination(self, page_request: PageRequest) -> list[R]:
        """Scan, sort in memory and slice out one page."""
        records = await self.find_all()
        return self._sort_and_slice(records, page_request)

    async def count(self) -> int:
        """Count records by scanning keys only."""
        try:
            return await asyncio.to_thread(self._count_items)
        except Exception as e:
            logger.error(f"Failed to count {self.collection_name}: {e}")
            raise

    async def delete_by_id(self, record_id: str) -> None:
        """Delete a record; DynamoDB treats a missing key as success."""
        try:
            await asyncio.to_thread(self.model_class(record_id).delete)
        except Exception as e:
            logger.error(f"Failed to delete {self.collection_name} record {record_id}: {e}")
            raise

        logger.debug(f"Deleted {self.collection_name} record {record_id}")

    async def exists_by_id(self, record_id: str) -> bool:
        """Check whether a record exists."""
        return await self.find_by_id(record_id) is not None

    async def find_by_field(self, name: str, value: Any) -> list[R]:
        """Scan with an equality filter on one attribute."""
        attribute = resolve_field(self.record_type, name)
        if attribute is None:
            raise ValueError(f"Unknown field: {name}")

        condition = getattr(self.model_class, attribute) == value

        try:
            return await asyncio.to_thread(self._scan_records, condition)
        except Exception as e:
            logger.error(f"Failed to filter {self.collection_name} by {attribute}: {e}")
            raise
