"""Create the products/orders/users tables for the SQL document store.

Run as ``python -m marketplace.db.create_tables`` to prepare the database named
by DATABASE_URL before pointing STORAGE_BACKEND=sql at it.
"""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from marketplace.core.config import get_settings

from .session import Base, get_engine
from . import models  # noqa: F401  # registers the tables on Base.metadata


def create_all(database_url: str | None = None) -> None:
    Base.metadata.create_all(bind=get_engine(database_url))


if __name__ == "__main__":
    target = get_settings().database_url
    try:
        create_all(target)
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not create marketplace tables in {target}: {exc}") from exc
    print(f"Marketplace tables ready in {target}.")
