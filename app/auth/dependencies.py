# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# GET /giveme is gated by a single shared secret passed as ?key=...
# The query is validated first, then the key is checked by AuthGuard.
#
# Usage:
#   from app.auth import require_retrieval_key
#
#   @router.get("/giveme")
#   async def giveme(command: RetrievalCommand = Depends(require_retrieval_key)):
#       return {"unbounded": command.unbounded}
# =============================================================================

import logging
from typing import Annotated

from fastapi import Depends, Query

from app.dependencies import AuthGuardDep
from app.exceptions import AuthError
from core.models.log_entry import RetrievalCommand
from core.services.request_validator import RequestValidator

logger = logging.getLogger(__name__)


async def get_retrieval_command(
    key: Annotated[str | None, Query(description="Shared secret")] = None,
    all_flag: Annotated[
        str | None,
        Query(alias="all", description="Return every entry instead of the most recent ones"),
    ] = None,
) -> RetrievalCommand:
    """
    Decode the GET /giveme query into a RetrievalCommand.

    `all` is read as a raw string so a malformed value means "false"
    instead of a validation error.
    """
    return RequestValidator.parse_retrieval(key, all_flag)


async def require_retrieval_key(
    guard: AuthGuardDep,
    command: RetrievalCommand = Depends(get_retrieval_command),
) -> RetrievalCommand:
    """
    Authorize a retrieval.

    Returns:
        RetrievalCommand: The validated command, once the key matched

    Raises:
        AuthError: 401 if the key is missing or wrong (indistinguishable)
    """
    if not guard.authorize(command.key):
        logger.warning("Rejected /giveme request: missing or incorrect key")
        raise AuthError()
    return command
