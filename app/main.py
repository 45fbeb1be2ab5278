"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request

from app.api.responses import NO_CACHE_HEADERS
from app.api.v1.router import api_router
from app.core.cache import ResponseCache
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.db.init_db import init_db
from app.db.session import DocumentStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[DocumentStore] = None, clock: Callable[[], float] = time.time) -> FastAPI:
    """Build the application around ``store`` (one is built from settings if omitted)."""
    configure_logging(settings.LOG_LEVEL)

    if store is None:
        store = DocumentStore(settings.MONGODB_URI, settings.MONGODB_DB, timeout_ms=settings.MONGODB_TIMEOUT_MS)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.CREATE_INDEXES_ON_STARTUP and store.uri and store.db_name:
            init_db(store.get_connection())
        yield
        store.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Academy management backend: players, coaches, sessions, batches and finance.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan)

    app.state.store = store
    app.state.player_cache = ResponseCache(settings.CACHE_TTL_SECONDS, clock=clock)
    app.state.session_cache = ResponseCache(settings.CACHE_TTL_SECONDS, clock=clock)

    register_exception_handlers(app)

    @app.middleware("http")
    async def no_cache_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in NO_CACHE_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    # Include API router
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "status": "healthy"
        }

    @app.get("/info")
    async def info():
        return {
            "project name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "authors": settings.AUTHORS,
            "project url": settings.PROJECT_URL
        }

    return app


app = create_app()
