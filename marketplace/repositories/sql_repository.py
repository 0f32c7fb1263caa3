"""Document store backed by SQLAlchemy (SQLite by default)."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from marketplace.db.models import OrderRecord, ProductRecord, UserRecord
from marketplace.db.create_tables import create_all
from marketplace.db.session import get_session

from .base import DocumentStore, StorageError, StorageReadError, StorageWriteError, db_defaults

logger = logging.getLogger(__name__)


def _text(value) -> str | None:
    if value is None:
        return None
    return str(value)


class SQLDocumentStore(DocumentStore):
    """
    Keeps each collection entry as one row whose ``data`` column holds the
    JSON payload. ``position`` preserves insertion order so ``read()`` hands
    back the same arrays the JSON backend would.
    """

    def __init__(self, database_url: str) -> None:
        super().__init__()
        self.database_url = database_url

    def __repr__(self) -> str:
        return f"SQLDocumentStore({self.database_url!r})"

    def initialize(self) -> None:
        try:
            create_all(self.database_url)
        except SQLAlchemyError as exc:
            raise StorageError(f"Cannot create tables: {exc}") from exc

    # -------------------------- rows <-> document --------------------------
    def _load(self, session: Session) -> dict:
        products = session.execute(select(ProductRecord).order_by(ProductRecord.position)).scalars().all()
        orders = session.execute(select(OrderRecord).order_by(OrderRecord.position)).scalars().all()
        users = session.execute(select(UserRecord).order_by(UserRecord.position)).scalars().all()
        return db_defaults(
            {
                "products": [dict(row.data or {}) for row in products],
                "orders": [dict(row.data or {}) for row in orders],
                "users": [dict(row.data or {}) for row in users],
            }
        )

    def _replace(self, session: Session, document: dict) -> None:
        db_defaults(document)
        session.execute(delete(ProductRecord))
        session.execute(delete(OrderRecord))
        session.execute(delete(UserRecord))
        for position, item in enumerate(document["products"]):
            session.add(
                ProductRecord(
                    product_id=_text(item.get("id")),
                    seller_id=_text(item.get("sellerId")),
                    position=position,
                    data=item,
                )
            )
        for position, item in enumerate(document["orders"]):
            session.add(
                OrderRecord(
                    order_id=_text(item.get("id")),
                    user_id=_text(item.get("userId")),
                    position=position,
                    data=item,
                )
            )
        for position, item in enumerate(document["users"]):
            session.add(UserRecord(position=position, data=item))

    # -------------------------- DocumentStore --------------------------
    def read(self) -> dict:
        try:
            with get_session(self.database_url) as session:
                return self._load(session)
        except SQLAlchemyError as exc:
            logger.error("Error reading database %s: %s", self.database_url, exc)
            raise StorageReadError(str(exc)) from exc

    def write(self, document: dict) -> bool:
        try:
            with get_session(self.database_url) as session:
                self._replace(session, document)
                session.commit()
            return True
        except (SQLAlchemyError, AttributeError, TypeError) as exc:
            logger.error("Error writing database %s: %s", self.database_url, exc)
            return False

    @contextmanager
    def transaction(self) -> Iterator[dict]:
        with self._lock, get_session(self.database_url) as session:
            try:
                document = self._load(session)
            except SQLAlchemyError as exc:
                logger.error("Error reading database %s: %s", self.database_url, exc)
                raise StorageReadError(str(exc)) from exc
            yield document
            try:
                self._replace(session, document)
                session.commit()
            except (SQLAlchemyError, AttributeError, TypeError) as exc:
                session.rollback()
                logger.error("Error writing database %s: %s", self.database_url, exc)
                raise StorageWriteError(str(exc)) from exc
