"""API request/response schemas (Pydantic)."""

from gallery.schemas.app_setting import AppSettingsResponse, AppSettingsUpdateRequest
from gallery.schemas.health import HealthResponse
from gallery.schemas.tag import TagResponse, TagSearchResponse

__all__ = [
    "AppSettingsResponse",
    "AppSettingsUpdateRequest",
    "HealthResponse",
    "TagResponse",
    "TagSearchResponse",
]
