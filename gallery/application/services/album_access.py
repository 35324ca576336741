"""Album access evaluation for one tag search (lazy, per-call cache)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gallery.application.dtos.album import AlbumResult
from gallery.application.interfaces.repositories import IAlbumRepository
from gallery.application.interfaces.services import IAlbumAccessResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class VisibilityRule:
    """How tag associations must be filtered for a viewer.

    deny_all: nothing is visible; no query should be issued.
    album_ids: only associations on (or owned by) these albums are visible.
    public_only: associations on private albums are hidden.
    """

    deny_all: bool = False
    album_ids: frozenset[int] | None = None
    public_only: bool = False


class AlbumAccessEvaluator:
    """Answers "can this viewer see the root album" and "which albums can they see".

    Both answers are resolved lazily on first access and reused for the
    lifetime of the instance. Build one instance per search call; never
    share it between viewers.
    """

    def __init__(
        self,
        album_repo: IAlbumRepository,
        access_resolver: IAlbumAccessResolver,
        *,
        gallery_id: int,
        roles: frozenset[str],
        is_authenticated: bool,
    ) -> None:
        self.album_repo = album_repo
        self.access_resolver = access_resolver
        self.gallery_id = gallery_id
        self.roles = roles
        self.is_authenticated = is_authenticated
        self._root_album: AlbumResult | None = None
        self._can_view_root: bool | None = None
        self._viewable_album_ids: frozenset[int] | None = None

    async def root_album(self) -> AlbumResult:
        """Return the gallery's root album (ResourceNotFoundException propagates)."""
        if self._root_album is None:
            self._root_album = await self.album_repo.load_root_album(self.gallery_id)
        return self._root_album

    async def can_view_root(self) -> bool:
        """Return True if the viewer may see the root album, i.e. the whole gallery."""
        if self._can_view_root is None:
            root = await self.root_album()
            self._can_view_root = await self.access_resolver.can_user_view_album(
                root, self.roles, self.is_authenticated
            )
            logger.debug(
                "Root album access resolved: gallery_id=%s authenticated=%s can_view_root=%s",
                self.gallery_id,
                self.is_authenticated,
                self._can_view_root,
            )
        return self._can_view_root

    async def viewable_album_ids(self) -> frozenset[int]:
        """Return ids of albums in the gallery the viewer's roles grant access to."""
        if self._viewable_album_ids is None:
            self._viewable_album_ids = await self.access_resolver.get_viewable_album_ids(
                self.roles, self.gallery_id
            )
        return self._viewable_album_ids

    async def visibility_rule(self) -> VisibilityRule:
        """Return the association filter for this viewer.

        Authenticated with root access: everything. Authenticated without
        root access: only albums granted by roles. Anonymous with root
        access: only non-private albums. Anonymous without root access:
        nothing.
        """
        if self.is_authenticated:
            if await self.can_view_root():
                return VisibilityRule()
            return VisibilityRule(album_ids=await self.viewable_album_ids())
        if await self.can_view_root():
            return VisibilityRule(public_only=True)
        return VisibilityRule(deny_all=True)
