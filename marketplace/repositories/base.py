"""
Storage contract shared by every persistence adapter.

The whole marketplace state is one *document*::

    {"products": [...], "orders": [...], "users": [...]}

Stores hand out the full document on ``read()``, replace it wholesale on
``write()``, and offer ``transaction()`` for read-modify-write sequences
that must not interleave with another writer.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

COLLECTIONS = ("products", "orders", "users")


class StorageError(Exception):
    """Base exception for persistence failures."""


class StorageReadError(StorageError):
    """Raised when the stored document exists but cannot be loaded."""


class StorageWriteError(StorageError):
    """Raised by ``transaction()`` when the final write did not succeed."""


def default_document() -> dict:
    return {name: [] for name in COLLECTIONS}


def db_defaults(db: dict) -> dict:
    """Fill missing collections in place so callers can index them blindly."""
    for name in COLLECTIONS:
        if not isinstance(db.get(name), list):
            db[name] = []
    return db


class DocumentStore:
    """
    Base class for stores. Subclasses implement ``initialize``, ``read`` and
    ``write``; the locking transaction is shared.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def initialize(self) -> None:
        raise NotImplementedError

    def read(self) -> dict:
        raise NotImplementedError

    def write(self, document: dict) -> bool:
        raise NotImplementedError

    @contextmanager
    def transaction(self) -> Iterator[dict]:
        with self._lock:
            document = self.read()
            yield document
            if not self.write(document):
                raise StorageWriteError("Failed to persist document")
