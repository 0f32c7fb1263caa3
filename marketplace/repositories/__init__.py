"""
Persistence adapters.

Services depend on the DocumentStore interface and never touch the JSON
file or the SQL session directly; ``build_store`` picks the backend from
Settings.
"""

from __future__ import annotations

from marketplace.core.config import Settings

from .base import (
    DocumentStore,
    StorageError,
    StorageReadError,
    StorageWriteError,
    db_defaults,
    default_document,
)
from .json_storage import JsonDocumentStore
from .sql_repository import SQLDocumentStore

BACKENDS = ("json", "sql")


def build_store(settings: Settings) -> DocumentStore:
    backend = (settings.storage_backend or "json").lower()
    if backend == "json":
        return JsonDocumentStore(settings.data_file)
    if backend == "sql":
        return SQLDocumentStore(settings.database_url)
    raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}; expected one of {', '.join(BACKENDS)}")


__all__ = [
    "BACKENDS",
    "DocumentStore",
    "JsonDocumentStore",
    "SQLDocumentStore",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "build_store",
    "db_defaults",
    "default_document",
]
