# -*- coding: utf-8 -*-
"""Draft persistence for BEP documents in progress."""

from typing import List, Optional

from app.config import StorageKeys
from models import BEPDocument
from services.exceptions import StorageException
from services.export.export_strategy import deserialize_json, serialize_json
from utils.logger import get_logger

from .key_value_store import KeyValueStore

logger = get_logger(__name__)


class DraftRepository:
    """One JSON snapshot per document id, stored under ``bep_draft:<id>``."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    @staticmethod
    def _key(document_id: str) -> str:
        return f"{StorageKeys.DRAFT_PREFIX}{document_id}"

    def save(self, document: BEPDocument) -> str:
        """Store a snapshot of ``document`` and return its id."""
        self.store.set(self._key(document.id), serialize_json(document))
        logger.debug(f"Saved draft {document.id} (step {document.current_step})")
        return document.id

    def load(self, document_id: str) -> Optional[BEPDocument]:
        """
        Load a draft.

        Returns:
            The document, or None when no draft is stored

        Raises:
            StorageException: if the stored snapshot is not valid JSON
        """
        raw = self.store.get(self._key(document_id))
        if raw is None:
            return None
        try:
            return deserialize_json(raw)
        except ValueError as e:
            raise StorageException("Stored draft is not valid JSON", key=self._key(document_id), original_error=e)

    def delete(self, document_id: str) -> None:
        self.store.remove(self._key(document_id))
        logger.debug(f"Deleted draft {document_id}")

    def list_ids(self) -> List[str]:
        """Ids of all stored drafts."""
        prefix = StorageKeys.DRAFT_PREFIX
        return [key[len(prefix):] for key in self.store.keys(prefix)]
