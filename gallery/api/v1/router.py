"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes use
dependencies from gallery.api.v1.dependencies.
"""

from fastapi import APIRouter

from gallery.api.v1.endpoints import app_settings, health, tags

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tags.router, prefix="/galleries", tags=["tags"])
api_router.include_router(
    app_settings.router, prefix="/app-settings", tags=["app-settings"]
)
