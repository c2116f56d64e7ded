# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# The lifespan in main.py builds each resource once and stores it on
# app.state; these functions hand them to route handlers via Depends().
# Tests replace them with app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services.auth_guard import AuthGuard
from core.services.log_reader import LogReader
from core.services.log_writer import LogWriter


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_auth_guard(request: Request) -> AuthGuard:
    """Guard holding the configured shared secret."""
    return request.app.state.auth_guard


def get_log_writer(request: Request) -> LogWriter:
    """Writer bound to the shared engine."""
    return request.app.state.log_writer


def get_log_reader(request: Request) -> LogReader:
    """Reader bound to the shared engine."""
    return request.app.state.log_reader


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
AuthGuardDep = Annotated[AuthGuard, Depends(get_auth_guard)]
LogWriterDep = Annotated[LogWriter, Depends(get_log_writer)]
LogReaderDep = Annotated[LogReader, Depends(get_log_reader)]
