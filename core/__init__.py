# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the framework-agnostic core of the log service:
# - models/: Pydantic schemas (log entries, commands, response envelope)
# - services/: AuthGuard, RequestValidator, LogWriter, LogReader
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
