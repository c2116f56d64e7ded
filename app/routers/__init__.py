# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Liveness and readiness endpoints
# - logs.py: Log ingestion (POST /log) and retrieval (GET /giveme)
#
# Each router is mounted in main.py.
# =============================================================================

from . import health
from . import logs

__all__ = [
    "health",
    "logs",
]
