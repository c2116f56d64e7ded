# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Logbox API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_request_validation.py: Request parsing and shared-secret checks
# - test_log_store.py: LogWriter / LogReader against SQLite
# - test_api.py: End-to-end tests through the FastAPI TestClient
# - test_config.py: Settings loading and validation
#
# Run tests with: pytest
# =============================================================================
