# =============================================================================
# lib/database.py - Log Store Engine and Schema
# =============================================================================
# This module owns everything SQLAlchemy-specific that is not a query:
# - The `logs` table definition (SQLAlchemy Core)
# - Async engine creation with a bounded connection pool
# - Startup connectivity check and idempotent schema creation
#
# Usage:
#   from lib.database import create_engine_from_settings, init_schema
#   engine = create_engine_from_settings(settings)
#   await init_schema(engine)
# =============================================================================

from __future__ import annotations

import logging

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Index,
    MetaData,
    Table,
    Text,
    Uuid,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.config import Settings

logger = logging.getLogger(__name__)

metadata = MetaData()

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONPayload = JSON().with_variant(JSONB(), "postgresql")

logs_table = Table(
    "logs",
    metadata,
    Column("id", Uuid(as_uuid=True), primary_key=True),
    Column("name", Text, nullable=False),
    Column("data", JSONPayload, nullable=False),
    Column("created", DateTime(timezone=True), nullable=False),
)

# Supports ORDER BY created DESC, id DESC
Index("ix_logs_created_id", logs_table.c.created.desc(), logs_table.c.id.desc())


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create the async engine (and its connection pool) for the log store.

    SQLite URLs get the driver defaults; pool sizing only applies to
    server databases.

    Args:
        settings: Application settings

    Returns:
        AsyncEngine: Engine whose pool is shared by all requests
    """
    url = make_url(settings.database_url)
    logger.info(f"Connecting to database: {url.render_as_string(hide_password=True)}")

    if url.get_backend_name() == "sqlite":
        return create_async_engine(url, echo=False)

    return create_async_engine(
        url,
        echo=False,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,
        pool_pre_ping=True,
        pool_timeout=settings.DB_TIMEOUT,
    )


async def check_connection(engine: AsyncEngine) -> bool:
    """Check if database connection is working."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False


async def init_schema(engine: AsyncEngine) -> None:
    """Create the logs table and its index if they do not exist."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database schema ready")
