# =============================================================================
# app/responses.py - Envelope Responses
# =============================================================================
# Builds JSONResponse objects from an Envelope so that the HTTP status code
# and the body "status" field can never disagree.
# =============================================================================

from typing import Any

from fastapi.responses import JSONResponse

from core.models.envelope import Envelope
from core.models.log_entry import LogEntry


def envelope_response(status: int, message: str, data: Any | None = None) -> JSONResponse:
    """
    Build an envelope response.

    Args:
        status: HTTP status code, also written into the body
        message: Outcome description
        data: Optional payload (successful reads only)

    Returns:
        JSONResponse with status_code == body["status"]
    """
    envelope = Envelope(status=status, message=message, data=data)
    return JSONResponse(status_code=envelope.status, content=envelope.to_content())


def ok_response() -> JSONResponse:
    """Write success."""
    return envelope_response(200, "OK")


def entries_response(entries: list[LogEntry]) -> JSONResponse:
    """Read success; entries keep the order they were given in."""
    return envelope_response(200, "OK", [entry.to_wire() for entry in entries])
