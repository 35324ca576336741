"""Repository implementations (SQLAlchemy, async)."""

from gallery.infrastructure.persistence.repositories.album_repo import AlbumRepository
from gallery.infrastructure.persistence.repositories.app_setting_repo import (
    AppSettingRepository,
)
from gallery.infrastructure.persistence.repositories.base import BaseRepository
from gallery.infrastructure.persistence.repositories.gallery_repo import GalleryRepository
from gallery.infrastructure.persistence.repositories.metadata_tag_repo import (
    MetadataTagRepository,
)
from gallery.infrastructure.persistence.repositories.role_repo import GalleryRoleRepository

__all__ = [
    "AlbumRepository",
    "AppSettingRepository",
    "BaseRepository",
    "GalleryRepository",
    "GalleryRoleRepository",
    "MetadataTagRepository",
]
