# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error leaves the service as an envelope whose "status" field matches
# the HTTP status code. Storage errors never carry their cause to the client.
# =============================================================================

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.responses import envelope_response

logger = logging.getLogger(__name__)


class LogboxException(Exception):
    """
    Base exception for the log service.

    All custom exceptions inherit from this class and carry the status code
    and client-facing message of the envelope they turn into.
    """

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(LogboxException):
    """Raised when a request body or parameter has the wrong shape."""

    def __init__(self, message: str):
        super().__init__(message=message, status_code=400)


class AuthError(LogboxException):
    """
    Raised when the shared secret is missing or wrong.

    The message is fixed so callers cannot tell which of the two happened.
    """

    def __init__(self):
        super().__init__(message="Unauthorized", status_code=401)


class StorageError(LogboxException):
    """Raised when the log store fails. The message is generic on purpose."""

    def __init__(self, message: str):
        super().__init__(message=message, status_code=500)


# =============================================================================
# Exception Handlers
# =============================================================================

async def logbox_exception_handler(
    request: Request,
    exc: LogboxException
) -> JSONResponse:
    """Convert LogboxException to an envelope response."""
    return envelope_response(exc.status_code, exc.message)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle bodies FastAPI could not decode (e.g. malformed JSON).

    Reported as 400 with the first error's location, like ValidationError.
    """
    errors = exc.errors()
    if errors and errors[0].get("type") == "json_invalid":
        message = "Invalid body: malformed JSON"
    elif errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid field '{location}': {first.get('msg')}" if location else f"Invalid body: {first.get('msg')}"
    else:
        message = "Invalid request"
    return envelope_response(400, message)


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle anything the other handlers did not claim."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return envelope_response(500, "Internal server error")
