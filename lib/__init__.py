# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains infrastructure shared by the services:
# - database.py: SQLAlchemy table definition, async engine, schema setup
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import (
    check_connection,
    create_engine_from_settings,
    init_schema,
    logs_table,
    metadata,
)

__all__ = [
    "check_connection",
    "create_engine_from_settings",
    "init_schema",
    "logs_table",
    "metadata",
]
