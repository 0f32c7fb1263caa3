"""Order use cases."""

from __future__ import annotations

import logging

from marketplace.core.utils import new_order_id, utc_now_iso
from marketplace.repositories.base import DocumentStore

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def list_for_user(self, user_id: str) -> list[dict]:
        return [o for o in self.store.read()["orders"] if o.get("userId") == user_id]

    def create_order(self, fields: dict) -> dict:
        order = dict(fields)
        order["id"] = new_order_id()
        order["date"] = utc_now_iso()
        with self.store.transaction() as db:
            db["orders"].append(order)
        logger.info("created order %s for user %s", order["id"], order.get("userId"))
        return order
