"""
FastAPI Application Entry Point

This module builds the FastAPI application and configures:
- API routes
- Middleware (logging, CORS)
- Exception handlers rendering every error as ``{"message": ...}``
- Store connection on startup and close on shutdown

``create_app`` takes optional settings and store so tests can inject an
in-memory store. The module-level ``app`` is built lazily by uvicorn's
factory mode (``uvicorn washlava.main:create_app --factory``).
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from washlava import __version__
from washlava.api.errors import INTERNAL_ERROR_MESSAGE
from washlava.api.router import router
from washlava.core.setting import EnvSettingsOptions, Settings, get_settings
from washlava.db.context import AppContext
from washlava.db.interface import DocumentStore
from washlava.db.mongo_adapter import MongoStore
from washlava.middleware.logging import add_logging_middleware

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected request body on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request body"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings (loaded from the environment if None)
        store: Document store (a MongoStore built from settings if None)

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    if store is None:
        store = MongoStore(
            settings.MONGODB_URI,
            settings.MONGODB_DATABASE,
            settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        )

    # interactive docs are not served in production
    show_docs = settings.ENV_SETTING != EnvSettingsOptions.production
    app = FastAPI(
        title="Washlava",
        description="REST API for a laundry-service marketplace",
        version=__version__,
        docs_url="/docs" if show_docs else None,
        redoc_url="/redoc" if show_docs else None,
        openapi_url="/openapi.json" if show_docs else None,
    )
    app.state.context = AppContext.build(settings, store)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    add_logging_middleware(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.on_event("startup")
    async def startup_event():
        """Connect to the store before accepting requests."""
        await store.connect()

    @app.on_event("shutdown")
    async def shutdown_event():
        """Close the store connection."""
        await store.close()

    return app
