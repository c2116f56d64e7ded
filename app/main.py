# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Logbox API.
# It builds the FastAPI application with its lifespan, handlers and routers.
#
# Usage:
#   uvicorn app.main:app --reload
#   logbox                      (console script, binds HOST:PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.config import Settings, get_settings
from app.exceptions import (
    LogboxException,
    logbox_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from app.routers import health, logs
from core.services.auth_guard import AuthGuard
from core.services.log_reader import LogReader
from core.services.log_writer import LogWriter
from lib.database import check_connection, create_engine_from_settings, init_schema

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(settings: Settings | None = None, engine: AsyncEngine | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration to use (defaults to get_settings())
        engine: Pre-built engine; when omitted the lifespan creates one
            from settings and disposes it on shutdown

    Returns:
        FastAPI: The configured application
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: Connect to the store, create the schema, build components
        - Shutdown: Dispose the connection pool if we created it
        """
        logger.info(f"Starting Logbox API in {settings.ENVIRONMENT} mode")
        if settings.uses_default_key:
            logger.warning("KEY is not set; using the insecure default shared secret")

        db = engine or create_engine_from_settings(settings)

        if not await check_connection(db):
            if engine is None:
                await db.dispose()
            raise RuntimeError("Could not connect to the log database")

        await init_schema(db)
        logger.info("Connected to database")

        app.state.engine = db
        app.state.auth_guard = AuthGuard(settings.KEY)
        app.state.log_writer = LogWriter(db, timeout=settings.DB_TIMEOUT)
        app.state.log_reader = LogReader(db, timeout=settings.DB_TIMEOUT)

        yield

        logger.info("Shutting down Logbox API")
        if engine is None:
            await db.dispose()

    app = FastAPI(
        title="Logbox API",
        description="Store named JSON log events and read them back, newest first.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(LogboxException, logbox_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(health.router, tags=["Health"])
    app.include_router(logs.router, tags=["Logs"])

    return app


def run() -> None:
    """Start the API server on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


# Application instance for `uvicorn app.main:app`
app = create_app()


if __name__ == "__main__":
    run()
