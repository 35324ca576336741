"""Application DTOs (read-models and inputs; no ORM dependency)."""

from gallery.application.dtos.album import AlbumResult, GalleryRoleResult
from gallery.application.dtos.app_setting import AppSettingRow, AppSettings
from gallery.application.dtos.tag import Tag, TagAssociationFilter, TagSearchOptions

__all__ = [
    "AlbumResult",
    "AppSettingRow",
    "AppSettings",
    "GalleryRoleResult",
    "Tag",
    "TagAssociationFilter",
    "TagSearchOptions",
]
