from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from marketplace.repositories.base import StorageError, StorageWriteError
from marketplace.routers.common import InvalidBodyError, error_response, get_state_service, json_body
from marketplace.services.identity_service import AuthenticationRequiredError, IdentityService
from marketplace.services.product_service import ProductError, ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


def _products(request: Request) -> ProductService:
    return get_state_service(request, "product_service")


def _identity(request: Request) -> IdentityService:
    return get_state_service(request, "identity_service")


@router.get("")
def list_products(request: Request):
    try:
        return _products(request).list_products()
    except Exception:
        logger.exception("list products failed")
        return error_response("Failed to fetch products", 500)


@router.get("/seller/{seller_id}")
def list_seller_products(seller_id: str, request: Request):
    try:
        return _products(request).list_by_seller(seller_id)
    except Exception:
        logger.exception("list products for seller %s failed", seller_id)
        return error_response("Failed to fetch seller products", 500)


@router.get("/{product_id}")
def get_product(product_id: str, request: Request):
    try:
        return _products(request).get_product(product_id)
    except ProductError as exc:
        return error_response(exc.message, exc.status_code)
    except Exception:
        logger.exception("get product %s failed", product_id)
        return error_response("Failed to fetch product", 500)


@router.post("")
async def create_product(request: Request):
    try:
        body = await json_body(request)
        owner = _identity(request).creator(request.headers)
        product = _products(request).create_product(body, owner)
        return JSONResponse(product, status_code=201)
    except (InvalidBodyError, AuthenticationRequiredError) as exc:
        return error_response(exc.message, exc.status_code)
    except StorageWriteError:
        return error_response("Failed to save product", 500)
    except Exception:
        logger.exception("create product failed")
        return error_response("Failed to create product", 500)


@router.put("/{product_id}")
async def update_product(product_id: str, request: Request):
    try:
        body = await json_body(request)
        principal = _identity(request).resolve(body, request.headers)
        return _products(request).update_product(product_id, body, principal)
    except (InvalidBodyError, AuthenticationRequiredError, ProductError) as exc:
        return error_response(exc.message, exc.status_code)
    except StorageError:
        return error_response("Failed to update product", 500)
    except Exception:
        logger.exception("update product %s failed", product_id)
        return error_response("Failed to update product", 500)


@router.delete("/{product_id}")
async def delete_product(product_id: str, request: Request):
    try:
        body = await json_body(request)
        principal = _identity(request).resolve(body, request.headers, allow_header=True)
        _products(request).delete_product(product_id, principal)
        return {"message": "Product deleted successfully"}
    except (InvalidBodyError, AuthenticationRequiredError, ProductError) as exc:
        return error_response(exc.message, exc.status_code)
    except StorageError:
        return error_response("Failed to delete product", 500)
    except Exception:
        logger.exception("delete product %s failed", product_id)
        return error_response("Failed to delete product", 500)
