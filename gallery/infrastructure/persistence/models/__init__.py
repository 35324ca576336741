"""Persistence models: ORM entities and mixins."""

from gallery.infrastructure.persistence.models.album import Album, MediaObject
from gallery.infrastructure.persistence.models.app_setting import AppSetting
from gallery.infrastructure.persistence.models.gallery import Gallery
from gallery.infrastructure.persistence.models.metadata import Metadata, MetadataTag, Tag
from gallery.infrastructure.persistence.models.mixins import (
    GalleryMixin,
    IntIdMixin,
    TimestampMixin,
)
from gallery.infrastructure.persistence.models.role import GalleryRole, RoleAlbum

__all__ = [
    "Album",
    "AppSetting",
    "Gallery",
    "GalleryRole",
    "MediaObject",
    "Metadata",
    "MetadataTag",
    "RoleAlbum",
    "Tag",
    "GalleryMixin",
    "IntIdMixin",
    "TimestampMixin",
]
