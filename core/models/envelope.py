# =============================================================================
# core/models/envelope.py - Response Envelope Schema
# =============================================================================
# Every /log and /giveme response body has the same shape:
#   {"status": 200, "message": "OK", "data": [...]}
# "data" is only present on successful reads.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


class Envelope(BaseModel):
    """
    Uniform response wrapper.

    The HTTP status code of the response always equals `status`.

    Example:
        {"status": 401, "message": "Unauthorized"}
    """

    status: int = Field(
        ...,
        ge=100,
        le=599,
        description="HTTP status code, repeated in the body"
    )

    message: str = Field(
        ...,
        description="Human-readable outcome"
    )

    data: Any | None = Field(
        default=None,
        description="Payload of a successful read"
    )

    def to_content(self) -> dict[str, Any]:
        """Serialize for a JSON response, dropping `data` when absent."""
        # exclude_none would also strip nulls inside the payload
        content: dict[str, Any] = {"status": self.status, "message": self.message}
        if self.data is not None:
            content["data"] = self.data
        return content
