# =============================================================================
# core/models/log_entry.py - Log Entry Schemas
# =============================================================================
# These models define the contract for log ingestion and retrieval:
# - LogCreate: Validated body of POST /log
# - LogEntry: One stored row, as returned by GET /giveme
# - RetrievalCommand: Validated query of GET /giveme
#
# Entries are immutable once written: there is no update or delete schema.
# =============================================================================

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LogCreate(BaseModel):
    """
    Schema for submitting a new log event.

    `data` is opaque: it is stored and returned verbatim, never inspected.
    Unknown fields in the body are ignored. Types are not coerced, so a
    numeric name or a string payload is rejected.

    Example:
        {
            "name": "checkout",
            "data": {"cart": 3, "total": 42.5}
        }
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = Field(
        ...,
        min_length=1,
        description="Label of the event"
    )

    data: dict[str, Any] = Field(
        ...,
        description="Arbitrary JSON object payload"
    )


class LogEntry(BaseModel):
    """
    One persisted log event.

    `id` and `created` are always assigned by the service.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "checkout",
            "data": {"cart": 3},
            "created": "2024-01-15T10:30:00.123456+00:00"
        }
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    data: dict[str, Any]
    created: datetime

    def to_wire(self) -> dict[str, Any]:
        """Serialize for the /giveme response (id as string, ISO-8601 timestamp)."""
        return {
            "id": str(self.id),
            "name": self.name,
            "data": self.data,
            "created": self.created.isoformat(),
        }


class RetrievalCommand(BaseModel):
    """Validated query of GET /giveme."""

    model_config = ConfigDict(frozen=True)

    key: str | None = None
    unbounded: bool = False
