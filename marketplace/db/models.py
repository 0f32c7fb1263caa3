"""SQLAlchemy models mirroring the collections of the JSON document."""
from __future__ import annotations

from sqlalchemy import Column, Integer, Text, JSON

from .session import Base


# Row keys are synthetic: files written by older builds used time-derived ids
# that can collide, and the document (not the table) owns the identifiers.
class ProductRecord(Base):
    __tablename__ = "products"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Text, nullable=True, index=True)
    seller_id = Column(Text, nullable=True, index=True)
    position = Column(Integer, nullable=False, index=True)
    data = Column(JSON, nullable=False, default=dict)


class OrderRecord(Base):
    __tablename__ = "orders"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Text, nullable=True, index=True)
    user_id = Column(Text, nullable=True, index=True)
    position = Column(Integer, nullable=False, index=True)
    data = Column(JSON, nullable=False, default=dict)


class UserRecord(Base):
    """Users are carried along with the document but no endpoint touches them."""

    __tablename__ = "users"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    position = Column(Integer, nullable=False, index=True)
    data = Column(JSON, nullable=False, default=dict)
