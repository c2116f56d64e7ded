# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides shared-secret authorization for the read endpoint.
#
# Usage:
#   from app.auth import require_retrieval_key
#
#   @router.get("/giveme")
#   async def giveme(command: RetrievalCommand = Depends(require_retrieval_key)):
#       ...
# =============================================================================

from app.auth.dependencies import get_retrieval_command, require_retrieval_key

__all__ = [
    "get_retrieval_command",
    "require_retrieval_key",
]
