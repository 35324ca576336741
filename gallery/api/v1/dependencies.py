"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the viewer, the tag search
collaborators and application settings. Routes depend only on these, not on infrastructure directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.application.services.app_settings_service import AppSettingsStore
from gallery.domain.exceptions import PermissionDeniedException
from gallery.infrastructure.persistence.database import get_db
from gallery.infrastructure.persistence.repositories import (
    AlbumRepository,
    AppSettingRepository,
    GalleryRepository,
    GalleryRoleRepository,
    MetadataTagRepository,
)
from gallery.infrastructure.services import AlbumAccessResolver


@dataclass(frozen=True)
class Viewer:
    """Who is asking. Set on request.state.viewer by the host's auth layer."""

    roles: frozenset[str] = field(default_factory=frozenset)
    is_authenticated: bool = False

    @classmethod
    def anonymous(cls) -> Viewer:
        return cls()


def get_viewer(request: Request) -> Viewer:
    """Viewer from request.state.viewer; anonymous when absent."""
    viewer = getattr(request.state, "viewer", None)
    if viewer is None:
        return Viewer.anonymous()
    return viewer


async def get_metadata_tag_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MetadataTagRepository:
    """Tag association repository (read-only)."""
    return MetadataTagRepository(db)


async def get_album_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AlbumRepository:
    """Album repository (read-only)."""
    return AlbumRepository(db)


async def get_album_access_resolver(
    db: Annotated[AsyncSession, Depends(get_db)],
    album_repo: Annotated[AlbumRepository, Depends(get_album_repo)],
) -> AlbumAccessResolver:
    """Role and gallery based album access resolver (same session as request)."""
    return AlbumAccessResolver(
        role_repo=GalleryRoleRepository(db),
        album_repo=album_repo,
        gallery_repo=GalleryRepository(db),
    )


async def get_app_setting_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AppSettingRepository:
    """Application setting repository (same session as request)."""
    return AppSettingRepository(db)


def get_app_settings_store(request: Request) -> AppSettingsStore:
    """Process-wide settings store loaded at startup (see lifespan)."""
    return request.app.state.app_settings


async def require_site_admin(
    viewer: Annotated[Viewer, Depends(get_viewer)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Viewer:
    """Require an authenticated viewer holding a role with allow_administer_site."""
    if not viewer.is_authenticated:
        raise HTTPException(status_code=401, detail="Not authenticated")
    roles = await GalleryRoleRepository(db).get_by_names(viewer.roles)
    if not any(r.allow_administer_site for r in roles):
        raise PermissionDeniedException("manage application settings")
    return viewer
