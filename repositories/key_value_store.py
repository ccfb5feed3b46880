# -*- coding: utf-8 -*-
"""
Key-value stores.

The only persistence interface the BEP generator depends on: string values
under string keys. ``InMemoryStore`` stands in for browser session storage
and tests; ``SQLiteKeyValueStore`` keeps values in a single-table SQLite
file.

There is no transaction across calls. Repositories do read-modify-write on
whole JSON values, which is safe for a single writer only.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from utils.logger import get_logger

logger = get_logger(__name__)


class KeyValueStore(ABC):
    """String key-value storage."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Value stored under ``key``, or None."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``. Missing keys are ignored."""
        pass

    @abstractmethod
    def keys(self, prefix: str = "") -> List[str]:
        """Stored keys starting with ``prefix``."""
        pass

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


class InMemoryStore(KeyValueStore):
    """Dict-backed store. Contents live as long as the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self, prefix: str = "") -> List[str]:
        return sorted(k for k in self._data if k.startswith(prefix))

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._data.items())

    def __len__(self) -> int:
        return len(self._data)


class SQLiteKeyValueStore(KeyValueStore):
    """Durable store in a SQLite file (table ``kv_store``)."""

    TABLE = "kv_store"

    def __init__(self, db_path: Optional[Path] = None):
        """Initialize SQLite store."""
        # Import sqlite3 only here
        import sqlite3 as _sqlite3
        self._sqlite3 = _sqlite3

        if db_path is None:
            from app.config import Config
            db_path = Config.STORE_PATH

        self._db_path = Path(db_path)
        self._connection = None

        # Ensure directory exists
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def db_path(self) -> Path:
        """Get database file path."""
        return self._db_path

    def connect(self) -> bool:
        """Establish SQLite connection and create the table."""
        try:
            if self._connection is None:
                self._connection = self._sqlite3.connect(str(self._db_path), check_same_thread=False)
                # Use dict-like row factory
                self._connection.row_factory = self._dict_factory
                self._connection.execute(
                    f"CREATE TABLE IF NOT EXISTS {self.TABLE} ("
                    "key TEXT PRIMARY KEY, "
                    "value TEXT NOT NULL, "
                    "updated_at TEXT DEFAULT CURRENT_TIMESTAMP)"
                )
                self._connection.commit()
            return True
        except self._sqlite3.Error as e:
            logger.error(f"SQLite connection error: {e}")
            return False

    def _dict_factory(self, cursor, row):
        """Convert row to dictionary."""
        columns = [col[0] for col in cursor.description]
        return {col: row[idx] for idx, col in enumerate(columns)}

    def close(self) -> None:
        """Close SQLite connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("SQLite connection closed")

    def _get_connection(self):
        """Get connection, connecting if needed."""
        if not self._connection:
            self.connect()
        return self._connection

    def _execute(self, query: str, params: Tuple = ()) -> List[Dict[str, str]]:
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(query, params)
            conn.commit()
            return cursor.fetchall() if cursor.description else []
        except self._sqlite3.Error as e:
            conn.rollback()
            logger.error(f"SQLite execute error: {e}\nQuery: {query}")
            raise
        finally:
            cursor.close()

    def get(self, key: str) -> Optional[str]:
        rows = self._execute(f"SELECT value FROM {self.TABLE} WHERE key = ?", (key,))
        return rows[0]["value"] if rows else None

    def set(self, key: str, value: str) -> None:
        self._execute(
            f"INSERT INTO {self.TABLE} (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
            (key, value),
        )

    def remove(self, key: str) -> None:
        self._execute(f"DELETE FROM {self.TABLE} WHERE key = ?", (key,))

    def keys(self, prefix: str = "") -> List[str]:
        rows = self._execute(
            f"SELECT key FROM {self.TABLE} WHERE substr(key, 1, ?) = ? ORDER BY key",
            (len(prefix), prefix),
        )
        return [row["key"] for row in rows]
