"""Product listing use cases (catalogue reads, seller-owned mutations)."""

from __future__ import annotations

import logging
from typing import Optional

from marketplace.core.utils import new_product_id, utc_now_iso
from marketplace.repositories.base import DocumentStore
from marketplace.services.identity_service import Principal

logger = logging.getLogger(__name__)

DEFAULT_RATING = 5.0


class ProductError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ProductNotFoundError(ProductError):
    def __init__(self, message: str = "Product not found"):
        super().__init__(message, 404)


class ProductForbiddenError(ProductError):
    def __init__(self, message: str):
        super().__init__(message, 403)


def _index_of(products: list, product_id: str) -> int:
    for idx, product in enumerate(products):
        if product.get("id") == product_id:
            return idx
    return -1


class ProductService:
    """CRUD over the ``products`` collection of the document."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def list_products(self) -> list[dict]:
        return self.store.read()["products"]

    def get_product(self, product_id: str) -> dict:
        products = self.store.read()["products"]
        idx = _index_of(products, product_id)
        if idx == -1:
            raise ProductNotFoundError()
        return products[idx]

    def list_by_seller(self, seller_id: str) -> list[dict]:
        return [p for p in self.store.read()["products"] if p.get("sellerId") == seller_id]

    def create_product(self, fields: dict, owner: Optional[Principal] = None) -> dict:
        product = dict(fields)
        if owner is not None:
            product["sellerId"] = owner.seller_id
        product.update(
            {
                "id": new_product_id(),
                "rating": DEFAULT_RATING,
                "createdAt": utc_now_iso(),
            }
        )
        product.pop("updatedAt", None)
        with self.store.transaction() as db:
            db["products"].append(product)
        logger.info("created product %s for seller %s", product["id"], product.get("sellerId"))
        return product

    def update_product(self, product_id: str, fields: dict, principal: Principal) -> dict:
        with self.store.transaction() as db:
            products = db["products"]
            idx = _index_of(products, product_id)
            if idx == -1:
                raise ProductNotFoundError()
            current = products[idx]
            if not principal.owns(current):
                raise ProductForbiddenError("Unauthorized to update this product")
            updated = {**current, **fields}
            updated["id"] = product_id
            if "sellerId" in current:
                updated["sellerId"] = current["sellerId"]
            if "createdAt" in current:
                updated["createdAt"] = current["createdAt"]
            updated["updatedAt"] = utc_now_iso()
            products[idx] = updated
        logger.info("updated product %s", product_id)
        return updated

    def delete_product(self, product_id: str, principal: Principal) -> None:
        with self.store.transaction() as db:
            products = db["products"]
            idx = _index_of(products, product_id)
            if idx == -1:
                raise ProductNotFoundError()
            if not principal.owns(products[idx]):
                raise ProductForbiddenError("Unauthorized to delete this product")
            del products[idx]
        logger.info("deleted product %s", product_id)
