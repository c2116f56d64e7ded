# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .auth_guard import AuthGuard
from .log_reader import LogReader
from .log_writer import LogWriter
from .request_validator import RequestValidator

__all__ = [
    "AuthGuard",
    "LogReader",
    "LogWriter",
    "RequestValidator",
]
