"""
JSON file persistence adapter.

The document is kept in a single human-readable file; every read loads the
whole file and every write replaces it.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
import os

from .base import DocumentStore, StorageError, StorageReadError, db_defaults, default_document

logger = logging.getLogger(__name__)


class JsonDocumentStore(DocumentStore):
    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__()
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"JsonDocumentStore({str(self.path)!r})"

    def initialize(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create data directory {self.path.parent}: {exc}") from exc
        if self.path.exists():
            # fail fast on a corrupt file instead of at the first request
            self.read()
            return
        if not self.write(default_document()):
            raise StorageError(f"Cannot create data file {self.path}")
        logger.info("created empty document at %s", self.path)

    def read(self) -> dict:
        if not self.path.exists():
            return default_document()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error("Error reading database %s: %s", self.path, exc)
            raise StorageReadError(str(exc)) from exc
        if not isinstance(data, dict):
            logger.error("Error reading database %s: top level is %s, not an object", self.path, type(data).__name__)
            raise StorageReadError("Document root must be a JSON object")
        return db_defaults(data)

    def write(self, document: dict) -> bool:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            payload = json.dumps(document, ensure_ascii=False, indent=2)
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, self.path)
            return True
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Error writing database %s: %s", self.path, exc)
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp)
            return False
