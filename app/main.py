"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.errors import AuthError, ConfigurationError, DataError
from app.db.init_db import init_db
from app.db.session import StoreClient

logging.basicConfig(level=settings.LOG_LEVEL,
                    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def open_store() -> StoreClient:
    """
    Build the store client from settings.

    Raises:
        ConfigurationError: If the secret key or database URL is unusable
    """
    if not settings.SECRET_KEY:
        raise ConfigurationError("SECRET_KEY is not set")
    return StoreClient.from_url(settings.DATABASE_URL, echo=settings.DEBUG)


def create_app(store: Optional[StoreClient] = None) -> FastAPI:
    """
    Build the application around ``store``.

    Without an explicit store one is opened from settings.  A
    configuration failure does not stop the process: every request that
    needs the store answers 503 with the configuration message.
    """
    config_error: Optional[ConfigurationError] = None
    owns_store = store is None
    if owns_store:
        try:
            store = open_store()
        except ConfigurationError as e:
            logger.error("Backend is not configured: %s", e.reason)
            config_error = e

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is not None:
            init_db(store)
        yield
        if owns_store and store is not None:
            store.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Daily training minutes for athletes, coaches and admins.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan)
    app.state.store = store
    app.state.config_error = config_error

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError):
        logger.error("Configuration error: %s", exc.reason)
        return JSONResponse(status_code=503, content={ "detail": exc.message })

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        logger.warning("Auth error: %s", exc.code)
        return JSONResponse(status_code=exc.status_code, content={ "detail": exc.message, "code": exc.code })

    @app.exception_handler(DataError)
    async def data_error_handler(request: Request, exc: DataError):
        return JSONResponse(status_code=503, content={ "detail": exc.message })

    # Include API router
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "message": "Training Log API",
            "version": settings.VERSION,
            "status": "healthy" if app.state.store is not None else "misconfigured"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        if app.state.store is None:
            return JSONResponse(status_code=503, content={
                "status": "misconfigured",
                "detail": app.state.config_error.message,
            })
        return {
            "status": "healthy",
            "service": "training-log-api",
            "version": settings.VERSION
        }

    return app


app = create_app()
