"""Application ports: repository and service protocols."""

from gallery.application.interfaces.repositories import (
    IAlbumRepository,
    IAppSettingRepository,
    IGalleryRepository,
    IGalleryRoleRepository,
    ITagAssociationRepository,
)
from gallery.application.interfaces.services import IAlbumAccessResolver

__all__ = [
    "IAlbumAccessResolver",
    "IAlbumRepository",
    "IAppSettingRepository",
    "IGalleryRepository",
    "IGalleryRoleRepository",
    "ITagAssociationRepository",
]
