"""Resolves album view access from roles and gallery flags (implements IAlbumAccessResolver)."""

from __future__ import annotations

import logging

from gallery.application.dtos.album import AlbumResult
from gallery.application.interfaces.repositories import (
    IAlbumRepository,
    IGalleryRepository,
    IGalleryRoleRepository,
)

logger = logging.getLogger(__name__)


def albums_under(
    assigned_ids: set[int] | frozenset[int], tree: dict[int, int | None]
) -> frozenset[int]:
    """Return ids in tree that are an assigned album or a descendant of one.

    tree maps album id -> parent id for one gallery.
    """
    covered: dict[int, bool] = {}

    def is_covered(album_id: int) -> bool:
        path: list[int] = []
        current: int | None = album_id
        answer = False
        while current is not None:
            if current in covered:
                answer = covered[current]
                break
            if current in assigned_ids:
                answer = True
                break
            if current in path:
                # Broken data (parent cycle); treat as not covered.
                break
            path.append(current)
            current = tree.get(current)
        for visited in path:
            covered[visited] = answer
        return answer

    return frozenset(album_id for album_id in tree if is_covered(album_id))


class AlbumAccessResolver:
    """Decides album visibility for a viewer's roles.

    Roles with allow_view_album see their assigned albums and all
    descendants; site administrators see every album. Anonymous viewers see
    non-private albums of galleries that allow anonymous browsing.

    Viewable ids are cached per (roles, gallery) for the life of the instance,
    which is one request.
    """

    def __init__(
        self,
        role_repo: IGalleryRoleRepository,
        album_repo: IAlbumRepository,
        gallery_repo: IGalleryRepository,
    ) -> None:
        self.role_repo = role_repo
        self.album_repo = album_repo
        self.gallery_repo = gallery_repo
        self._viewable: dict[tuple[frozenset[str], int], frozenset[int]] = {}

    async def get_viewable_album_ids(
        self, roles: frozenset[str], gallery_id: int
    ) -> frozenset[int]:
        """Return ids of the gallery's albums that the roles grant view access to."""
        key = (roles, gallery_id)
        if key not in self._viewable:
            self._viewable[key] = await self._resolve_viewable_album_ids(roles, gallery_id)
        return self._viewable[key]

    async def _resolve_viewable_album_ids(
        self, roles: frozenset[str], gallery_id: int
    ) -> frozenset[int]:
        if not roles:
            return frozenset()
        granting = [r for r in await self.role_repo.get_by_names(roles) if r.grants_view]
        if not granting:
            return frozenset()

        tree = await self.album_repo.get_album_tree(gallery_id)
        if any(r.allow_administer_site for r in granting):
            return frozenset(tree)

        assigned: set[int] = set()
        for role in granting:
            assigned.update(role.album_ids)
        viewable = albums_under(assigned, tree)
        logger.debug(
            "Viewable albums resolved: gallery_id=%s roles=%d albums=%d",
            gallery_id,
            len(granting),
            len(viewable),
        )
        return viewable

    async def can_user_view_album(
        self,
        album: AlbumResult,
        roles: frozenset[str],
        is_authenticated: bool,
    ) -> bool:
        """Return True if a viewer with these roles may view the album."""
        if is_authenticated:
            viewable = await self.get_viewable_album_ids(roles, album.gallery_id)
            return album.id in viewable
        if album.is_private:
            return False
        return await self.gallery_repo.allows_anonymous_browsing(album.gallery_id)
