"""
Local file-based record repository implementation.

Stores each document as a JSON file:
    {base_dir}/
        {collection_name}/
            {record_id}.json
"""

import json
import os
from abc import abstractmethod
from pathlib import Path
from typing import Any

from loguru import logger

from campus.infrastructure.repositories.record_repository import (
    R,
    RecordRepository,
    resolve_field,
)
from campus.models.pagination import PageRequest


class LocalRecordRepository(RecordRepository[R]):
    """
    File-based record storage for local development.

    Writes go to a temporary file that is then renamed over the
    document, so readers never see a half-written file.
    """

    def __init__(self, base_dir: str = "./.local_infrastructure"):
        """
        Initialize local record repository.

        Args:
            base_dir: Base directory for document storage
        """
        self.base_dir = Path(base_dir)
        self.collection_dir = self.base_dir / self.collection_name

        self.collection_dir.mkdir(parents=True, exist_ok=True)

        logger.info(
            f"Initialized {type(self).__name__} at {self.collection_dir}"
        )

    @abstractmethod
    def _record_to_dict(self, record: R) -> dict[str, Any]:
        """Convert a record to a JSON-serializable dict."""

    @abstractmethod
    def _dict_to_record(self, data: dict[str, Any]) -> R:
        """Convert a stored dict back to a record."""

    def _document_path(self, record_id: str) -> Path:
        """Get path to a document file."""
        return self.collection_dir / f"{record_id}.json"

    def _read_all(self) -> list[R]:
        return [
            self._dict_to_record(json.loads(path.read_text()))
            for path in self.collection_dir.glob("*.json")
        ]

    async def save(self, record: R) -> str:
        """Store record to file."""
        self._stamp_for_save(record)
        path = self._document_path(record.id)
        tmp_path = path.with_suffix(".json.tmp")

        try:
            tmp_path.write_text(json.dumps(self._record_to_dict(record), indent=2))
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error(f"Failed to save {self.collection_name} record {record.id}: {e}")
            raise

        logger.debug(f"Saved {self.collection_name} record {record.id}")
        return record.id

    async def find_by_id(self, record_id: str) -> R | None:
        """Retrieve record by id."""
        path = self._document_path(record_id)

        if not path.exists():
            return None

        return self._dict_to_record(json.loads(path.read_text()))

    async def find_all(self) -> list[R]:
        """List all stored records."""
        return self._read_all()

    async def find_all_with_pagination(self, page_request: PageRequest) -> list[R]:
        """List one sorted page of records."""
        return self._sort_and_slice(self._read_all(), page_request)

    async def count(self) -> int:
        """Count stored documents."""
        return sum(1 for _ in self.collection_dir.glob("*.json"))

    async def delete_by_id(self, record_id: str) -> None:
        """Delete a document file if present."""
        path = self._document_path(record_id)
        path.unlink(missing_ok=True)
        logger.debug(f"Deleted {self.collection_name} record {record_id}")

    async def exists_by_id(self, record_id: str) -> bool:
        """Check whether a document file exists."""
        return self._document_path(record_id).exists()

    async def find_by_field(self, name: str, value: Any) -> list[R]:
        """List records whose field equals value."""
        attribute = resolve_field(self.record_type, name)
        if attribute is None:
            raise ValueError(f"Unknown field: {name}")

        return [
            record
            for record in self._read_all()
            if getattr(record, attribute) == value
        ]
