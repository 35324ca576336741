"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gallery.application.dtos.album import AlbumResult


class IAlbumAccessResolver(Protocol):
    """Protocol for deciding which albums a viewer may see."""

    async def can_user_view_album(
        self,
        album: AlbumResult,
        roles: frozenset[str],
        is_authenticated: bool,
    ) -> bool:
        """Return True if a viewer with these roles may view the album."""

    async def get_viewable_album_ids(
        self, roles: frozenset[str], gallery_id: int
    ) -> frozenset[int]:
        """Return ids of the gallery's albums that the roles grant view access to."""
