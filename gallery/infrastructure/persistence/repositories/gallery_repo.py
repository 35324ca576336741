"""Gallery repository: gallery-level flags used by access checks."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.exceptions import ResourceNotFoundException
from gallery.infrastructure.persistence.models.gallery import Gallery
from gallery.infrastructure.persistence.repositories.base import BaseRepository


class GalleryRepository(BaseRepository[Gallery]):
    """Gallery lookups."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Gallery)

    async def allows_anonymous_browsing(self, gallery_id: int) -> bool:
        """Return the gallery's allow_anonymous_browsing flag.

        Raises:
            ResourceNotFoundException: No gallery with this id.
        """
        result = await self.db.execute(
            select(Gallery.allow_anonymous_browsing).where(Gallery.id == gallery_id)
        )
        allowed = result.scalar_one_or_none()
        if allowed is None:
            raise ResourceNotFoundException("gallery", str(gallery_id))
        return bool(allowed)
