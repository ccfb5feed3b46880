# -*- coding: utf-8 -*-
"""
BEP Generator Repository Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "KeyValueStore",
    "InMemoryStore",
    "SQLiteKeyValueStore",
    "JsonCollectionRepository",
    "ProjectRepository",
    "TemplateRepository",
    "RaciMatrixRepository",
    "LocalDatabase",
    "DraftRepository",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name in ("KeyValueStore", "InMemoryStore", "SQLiteKeyValueStore"):
        from . import key_value_store
        return getattr(key_value_store, name)
    elif name in ("JsonCollectionRepository", "ProjectRepository",
                  "TemplateRepository", "RaciMatrixRepository"):
        from . import collection_repository
        return getattr(collection_repository, name)
    elif name == "LocalDatabase":
        from .local_database import LocalDatabase
        return LocalDatabase
    elif name == "DraftRepository":
        from .draft_repository import DraftRepository
        return DraftRepository
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
