# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - log_entry.py: Log write body, stored entry, retrieval command
# - envelope.py: Uniform {status, message, data?} response body
#
# These models define the "contract" between API and clients.
# =============================================================================

from .envelope import Envelope
from .log_entry import LogCreate, LogEntry, RetrievalCommand

__all__ = [
    "Envelope",
    "LogCreate",
    "LogEntry",
    "RetrievalCommand",
]
