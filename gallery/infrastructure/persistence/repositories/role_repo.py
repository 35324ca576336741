"""Gallery role repository. Read methods return GalleryRoleResult with assigned album ids."""

from __future__ import annotations

from collections import defaultdict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.application.dtos.album import GalleryRoleResult
from gallery.infrastructure.persistence.models.role import GalleryRole, RoleAlbum
from gallery.infrastructure.persistence.repositories.base import BaseRepository


class GalleryRoleRepository(BaseRepository[GalleryRole]):
    """Role lookups by name (role names come from the resolved viewer)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, GalleryRole)

    async def get_by_names(self, role_names: frozenset[str]) -> list[GalleryRoleResult]:
        """Return roles with the given names; unknown names are ignored."""
        if not role_names:
            return []
        result = await self.db.execute(
            select(GalleryRole)
            .where(GalleryRole.role_name.in_(sorted(role_names)))
            .order_by(GalleryRole.id)
        )
        roles = list(result.scalars().all())
        if not roles:
            return []

        album_result = await self.db.execute(
            select(RoleAlbum.role_id, RoleAlbum.album_id).where(
                RoleAlbum.role_id.in_([r.id for r in roles])
            )
        )
        albums_by_role: dict[int, set[int]] = defaultdict(set)
        for role_id, album_id in album_result.all():
            albums_by_role[role_id].add(album_id)

        return [
            GalleryRoleResult(
                id=r.id,
                role_name=r.role_name,
                allow_view_album=r.allow_view_album,
                allow_administer_site=r.allow_administer_site,
                album_ids=frozenset(albums_by_role.get(r.id, ())),
            )
            for r in roles
        ]
