from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from marketplace.repositories.base import StorageWriteError
from marketplace.routers.common import InvalidBodyError, error_response, get_state_service, json_body
from marketplace.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


def _orders(request: Request) -> OrderService:
    return get_state_service(request, "order_service")


@router.get("/{user_id}")
def list_user_orders(user_id: str, request: Request):
    try:
        return _orders(request).list_for_user(user_id)
    except Exception:
        logger.exception("list orders for user %s failed", user_id)
        return error_response("Failed to fetch orders", 500)


@router.post("")
async def create_order(request: Request):
    try:
        body = await json_body(request)
        order = _orders(request).create_order(body)
        return JSONResponse(order, status_code=201)
    except InvalidBodyError as exc:
        return error_response(exc.message, exc.status_code)
    except StorageWriteError:
        return error_response("Failed to save order", 500)
    except Exception:
        logger.exception("create order failed")
        return error_response("Failed to create order", 500)
