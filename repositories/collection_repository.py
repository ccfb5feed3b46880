# -*- coding: utf-8 -*-
"""
JSON collection repositories.

Each collection is a JSON array of records (plain dicts with camelCase keys)
stored under one key of a KeyValueStore, the same layout the browser build
keeps in localStorage.
"""

import json
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from app.config import StorageKeys
from services.exceptions import StorageException
from utils.datetime_utils import to_isoformat, utc_now
from utils.id_generator import generate_record_id
from utils.logger import get_logger

from .key_value_store import KeyValueStore

logger = get_logger(__name__)

Record = Dict[str, Any]


class JsonCollectionRepository:
    """Repository for one JSON-array collection."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Optional[Callable[[], str]] = None
    ):
        self.store = store
        self.key = key
        self._clock = clock
        self._id_factory = id_factory or (lambda: generate_record_id(clock))

    def initialize(self) -> None:
        """Create the collection as an empty array if it is missing."""
        if self.store.get(self.key) is None:
            self.store.set(self.key, "[]")
            logger.debug(f"Initialized collection {self.key}")

    def get_all(self) -> List[Record]:
        """
        All records in insertion order.

        Raises:
            StorageException: if the stored value is not a JSON array
        """
        raw = self.store.get(self.key)
        if raw is None:
            return []
        try:
            records = json.loads(raw)
        except ValueError as e:
            raise StorageException("Stored collection is not valid JSON", key=self.key, original_error=e)
        if not isinstance(records, list):
            raise StorageException("Stored collection is not a JSON array", key=self.key)
        return records

    def get(self, record_id: str) -> Optional[Record]:
        """Record with ``id == record_id``, or None."""
        return self.find_first(lambda record: record.get("id") == record_id)

    def find_first(self, predicate: Callable[[Record], bool]) -> Optional[Record]:
        return next((record for record in self.get_all() if predicate(record)), None)

    def find_all(self, predicate: Callable[[Record], bool]) -> List[Record]:
        return [record for record in self.get_all() if predicate(record)]

    def save(self, record: Record) -> Record:
        """
        Insert or update a record by ``id``.

        Existing records are shallow-merged with ``record`` and get a new
        ``updatedAt``. New records get an id (when missing), ``createdAt``
        and ``updatedAt``.

        Returns:
            The record as stored
        """
        records = self.get_all()
        now = to_isoformat(self._clock())
        record_id = record.get("id")

        for index, existing in enumerate(records):
            if record_id and existing.get("id") == record_id:
                saved = {**existing, **record, "updatedAt": now}
                records[index] = saved
                self._write(records)
                logger.debug(f"Updated {self.key} record {record_id}")
                return saved

        saved = dict(record)
        saved["id"] = record_id or self._id_factory()
        saved["createdAt"] = now
        saved["updatedAt"] = now
        records.append(saved)
        self._write(records)
        logger.debug(f"Created {self.key} record {saved['id']}")
        return saved

    def delete(self, record_id: str) -> bool:
        """
        Remove a record.

        Returns:
            True if a record was removed
        """
        records = self.get_all()
        remaining = [record for record in records if record.get("id") != record_id]
        self._write(remaining)
        deleted = len(remaining) != len(records)
        if deleted:
            logger.debug(f"Deleted {self.key} record {record_id}")
        return deleted

    def replace_all(self, records: List[Record]) -> None:
        """Overwrite the whole collection."""
        self._write(list(records))

    def _write(self, records: List[Record]) -> None:
        self.store.set(self.key, json.dumps(records, ensure_ascii=False))


class ProjectRepository(JsonCollectionRepository):
    """Projects (``bailey_projects``)."""

    def __init__(self, store: KeyValueStore, **kwargs):
        super().__init__(store, StorageKeys.PROJECTS, **kwargs)

    def get_by_iso_number(self, iso_number: str) -> Optional[Record]:
        """Project whose ISO 19650 project identifier is ``iso_number``."""
        return self.find_first(lambda record: record.get("isoNumber") == iso_number)


class TemplateRepository(JsonCollectionRepository):
    """Document templates (``bailey_templates``)."""

    def __init__(self, store: KeyValueStore, **kwargs):
        super().__init__(store, StorageKeys.TEMPLATES, **kwargs)


class RaciMatrixRepository(JsonCollectionRepository):
    """Saved RACI matrices (``bailey_raci_matrices``)."""

    def __init__(self, store: KeyValueStore, **kwargs):
        super().__init__(store, StorageKeys.RACI_MATRICES, **kwargs)

    def get_by_project(self, project_id: str) -> List[Record]:
        """All matrices attached to a project."""
        return self.find_all(lambda record: record.get("projectId") == project_id)
