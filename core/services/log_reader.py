# =============================================================================
# core/services/log_reader.py - Log Retrieval
# =============================================================================
# Reads entries newest first. There are exactly two query shapes:
# - RECENT_QUERY: ORDER BY created DESC, id DESC LIMIT :limit
# - ALL_QUERY:    ORDER BY created DESC, id DESC
# The limit is always a bound parameter; it never enters the SQL text.
# =============================================================================

import asyncio
import logging
from datetime import timezone
from typing import Any

from sqlalchemy import Integer, bindparam, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.exceptions import StorageError
from core.models.log_entry import LogEntry
from lib.database import logs_table

logger = logging.getLogger(__name__)

READ_FAILED_MESSAGE = "Could not get data"

ALL_QUERY = (
    select(
        logs_table.c.id,
        logs_table.c.name,
        logs_table.c.data,
        logs_table.c.created,
    )
    .order_by(logs_table.c.created.desc(), logs_table.c.id.desc())
)

RECENT_QUERY = ALL_QUERY.limit(bindparam("limit", type_=Integer))


class LogReader:
    """
    Service for reading log entries.

    Ties on `created` are broken by `id` so repeated identical queries
    return the same order.
    """

    def __init__(self, engine: AsyncEngine, timeout: float):
        self._engine = engine
        self._timeout = timeout

    async def read(self, unbounded: bool, limit: int) -> list[LogEntry]:
        """
        Fetch entries ordered by `created` descending.

        Args:
            unbounded: Return every entry when True, ignoring `limit`
            limit: Maximum number of entries for a bounded read

        Returns:
            List of LogEntry, newest first

        Raises:
            ValueError: If limit is not positive
            StorageError: If the query fails or exceeds the deadline
        """
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")

        if unbounded:
            query, params = ALL_QUERY, {}
        else:
            query, params = RECENT_QUERY, {"limit": limit}

        try:
            rows = await asyncio.wait_for(self._fetch(query, params), timeout=self._timeout)
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to read log entries (unbounded={unbounded}): {e}")
            raise StorageError(READ_FAILED_MESSAGE) from e

        entries = [self._to_entry(row) for row in rows]
        logger.debug(f"Read {len(entries)} log entries (unbounded={unbounded})")
        return entries

    async def _fetch(self, query, params: dict[str, Any]) -> list[Any]:
        async with self._engine.connect() as conn:
            result = await conn.execute(query, params)
            return list(result.mappings().all())

    @staticmethod
    def _to_entry(row: Any) -> LogEntry:
        created = row["created"]
        # SQLite drops tzinfo; stored values are always UTC
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return LogEntry(
            id=row["id"],
            name=row["name"],
            data=row["data"],
            created=created,
        )
