# -*- coding: utf-8 -*-
"""
Local database of projects, templates and RACI matrices.

Groups the three JSON collections behind one object and provides the
backup format used to move data between installations.
"""

from datetime import datetime
from typing import Any, Callable, Dict, Optional

from utils.datetime_utils import to_isoformat, utc_now
from utils.logger import get_logger

from .collection_repository import (
    ProjectRepository,
    RaciMatrixRepository,
    TemplateRepository,
)
from .key_value_store import KeyValueStore

logger = get_logger(__name__)


class LocalDatabase:
    """Local project database over a KeyValueStore."""

    # Backup key -> attribute holding the collection
    _BACKUP_COLLECTIONS = {
        "projects": "projects",
        "templates": "templates",
        "raciMatrices": "raci_matrices",
    }

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Optional[Callable[[], str]] = None
    ):
        self.store = store
        self._clock = clock
        self.projects = ProjectRepository(store, clock=clock, id_factory=id_factory)
        self.templates = TemplateRepository(store, clock=clock, id_factory=id_factory)
        self.raci_matrices = RaciMatrixRepository(store, clock=clock, id_factory=id_factory)

    def initialize(self) -> None:
        """Create missing collections."""
        for attr in self._BACKUP_COLLECTIONS.values():
            getattr(self, attr).initialize()
        logger.info("Local database initialized")

    def export_data(self) -> Dict[str, Any]:
        """
        Snapshot every collection.

        Returns:
            ``{"projects": [...], "templates": [...], "raciMatrices": [...],
            "exportedAt": <ISO timestamp>}``
        """
        data: Dict[str, Any] = {
            key: getattr(self, attr).get_all()
            for key, attr in self._BACKUP_COLLECTIONS.items()
        }
        data["exportedAt"] = to_isoformat(self._clock())
        return data

    def import_data(self, data: Dict[str, Any]) -> None:
        """
        Restore collections from an ``export_data`` snapshot.

        Only collections present in ``data`` are overwritten.
        """
        for key, attr in self._BACKUP_COLLECTIONS.items():
            if key in data:
                getattr(self, attr).replace_all(data[key] or [])
                logger.info(f"Imported {len(data[key] or [])} {key}")
