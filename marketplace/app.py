from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace.core.config import Settings, get_settings
from marketplace.core.log import configure_logging
from marketplace.repositories import DocumentStore, build_store
from marketplace.routers import health as health_router
from marketplace.routers import orders as orders_router
from marketplace.routers import products as products_router
from marketplace.services.identity_service import IdentityService
from marketplace.services.order_service import OrderService
from marketplace.services.product_service import ProductService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store: DocumentStore = app.state.store
    try:
        store.initialize()
    except Exception:
        logger.exception("startup error: could not initialise %r", store)
        raise
    logger.info("storage ready (%s): %r", app.state.settings.app_env, store)
    yield


def create_app(settings: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """Factory usable by uvicorn/gunicorn (``--factory``) and by tests."""
    settings = settings or get_settings()
    configure_logging(settings)
    store = store or build_store(settings)

    app = FastAPI(title="Marketplace API", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.product_service = ProductService(store)
    app.state.order_service = OrderService(store)
    app.state.identity_service = IdentityService(settings)

    if settings.cors_origin:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[settings.cors_origin],
            allow_credentials=settings.cors_allow_credentials,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    app.include_router(products_router.router, prefix=settings.api_prefix)
    app.include_router(orders_router.router, prefix=settings.api_prefix)
    app.include_router(health_router.router, prefix=settings.api_prefix)
    return app
