# =============================================================================
# core/services/log_writer.py - Log Ingestion
# =============================================================================
# Persists one validated event per call as a single INSERT.
# The row id and timestamp are generated here, never taken from the client.
# =============================================================================

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable
from uuid import UUID, uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.exceptions import StorageError
from lib.database import logs_table

logger = logging.getLogger(__name__)

WRITE_FAILED_MESSAGE = "Could not log data"


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class LogWriter:
    """
    Service for writing log entries.

    One write is one atomic INSERT of the full row (id, name, data, created)
    inside its own transaction. Failures are not retried.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        timeout: float,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], UUID] = uuid4,
    ):
        self._engine = engine
        self._timeout = timeout
        self._clock = clock
        self._id_factory = id_factory

    async def write(self, name: str, data: dict[str, Any]) -> UUID:
        """
        Store a new log entry.

        Args:
            name: Event label (already validated, non-empty)
            data: Opaque JSON object payload

        Returns:
            The generated entry id

        Raises:
            StorageError: If the insert fails or exceeds the deadline.
                The cause is logged, not returned.
        """
        entry_id = self._id_factory()
        row = {
            "id": entry_id,
            "name": name,
            "data": data,
            "created": self._clock(),
        }

        try:
            await asyncio.wait_for(self._insert(row), timeout=self._timeout)
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to write log entry '{name}': {e}")
            raise StorageError(WRITE_FAILED_MESSAGE) from e

        logger.debug(f"Wrote log entry {entry_id} ({name})")
        return entry_id

    async def _insert(self, row: dict[str, Any]) -> None:
        async with self._engine.begin() as conn:
            await conn.execute(logs_table.insert(), row)
