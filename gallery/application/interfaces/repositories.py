"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gallery.application.dtos.album import AlbumResult, GalleryRoleResult
    from gallery.application.dtos.app_setting import AppSettingRow
    from gallery.application.dtos.tag import Tag, TagAssociationFilter


class ITagAssociationRepository(Protocol):
    """Protocol for counting tag associations (metadata_tag rows)."""

    async def count_tags(self, tag_filter: TagAssociationFilter) -> list[Tag]:
        """Return one Tag per distinct tag name matching the filter, with its association count."""


class IAlbumRepository(Protocol):
    """Protocol for album lookups."""

    async def load_root_album(self, gallery_id: int) -> AlbumResult:
        """Return the root album of the gallery. Raises ResourceNotFoundException when missing."""

    async def get_album_tree(self, gallery_id: int) -> dict[int, int | None]:
        """Return album id -> parent id for every album in the gallery."""


class IGalleryRoleRepository(Protocol):
    """Protocol for gallery role lookups."""

    async def get_by_names(self, role_names: frozenset[str]) -> list[GalleryRoleResult]:
        """Return roles with the given names (unknown names are ignored)."""


class IGalleryRepository(Protocol):
    """Protocol for gallery-level settings."""

    async def allows_anonymous_browsing(self, gallery_id: int) -> bool:
        """Return True if anonymous users may browse non-private albums of the gallery."""


class IAppSettingRepository(Protocol):
    """Protocol for application settings persistence."""

    async def get_all(self) -> list[AppSettingRow]:
        """Return every stored setting."""

    async def save(self, rows: list[AppSettingRow]) -> None:
        """Insert or update the given settings."""
