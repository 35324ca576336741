"""Album repository. Read methods return AlbumResult (DTO)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.application.dtos.album import AlbumResult
from gallery.domain.exceptions import ResourceNotFoundException
from gallery.infrastructure.persistence.models.album import Album
from gallery.infrastructure.persistence.repositories.base import BaseRepository


def _album_to_result(a: Album) -> AlbumResult:
    """Map ORM Album to application AlbumResult."""
    return AlbumResult(
        id=a.id,
        gallery_id=a.gallery_id,
        parent_id=a.parent_id,
        title=a.title,
        is_private=a.is_private,
    )


class AlbumRepository(BaseRepository[Album]):
    """Album lookups used by tag search and the album access resolver."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Album)

    async def load_root_album(self, gallery_id: int) -> AlbumResult:
        """Return the gallery's root album (the album without a parent).

        Raises:
            ResourceNotFoundException: The gallery has no root album (invalid gallery id).
        """
        result = await self.db.execute(
            select(Album)
            .where(Album.gallery_id == gallery_id, Album.parent_id.is_(None))
            .order_by(Album.id)
            .limit(1)
        )
        album = result.scalar_one_or_none()
        if album is None:
            raise ResourceNotFoundException("gallery", str(gallery_id))
        return _album_to_result(album)

    async def get_album_tree(self, gallery_id: int) -> dict[int, int | None]:
        """Return album id -> parent id for every album in the gallery."""
        result = await self.db.execute(
            select(Album.id, Album.parent_id).where(Album.gallery_id == gallery_id)
        )
        return {row[0]: row[1] for row in result.all()}
