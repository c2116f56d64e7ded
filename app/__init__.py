# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, lifespan, error handlers
# - config.py: Environment variable loading and settings
# - routers/: API endpoint definitions organized by feature
# - auth/: Shared-secret dependency for the read endpoint
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
