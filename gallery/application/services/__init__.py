"""Application services: album access evaluation, result pipeline, app settings."""

from gallery.application.services.album_access import AlbumAccessEvaluator, VisibilityRule
from gallery.application.services.app_settings_service import (
    AppSettingsStore,
    load_app_settings,
)
from gallery.application.services.tag_results import merge_tag_counts, sort_and_limit

__all__ = [
    "AlbumAccessEvaluator",
    "AppSettingsStore",
    "VisibilityRule",
    "load_app_settings",
    "merge_tag_counts",
    "sort_and_limit",
]
