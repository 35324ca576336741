"""Tag association counts over metadata_tag (implements ITagAssociationRepository).

Album-level and media-object-level associations go through the same
statement; TagAssociationFilter.kind selects which side is counted.
"""

from __future__ import annotations

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from gallery.application.dtos.tag import Tag, TagAssociationFilter
from gallery.domain.enums import AssociationKind
from gallery.domain.exceptions import UnsupportedOperationException
from gallery.infrastructure.persistence.models.album import Album, MediaObject
from gallery.infrastructure.persistence.models.metadata import Metadata, MetadataTag

# Album the association is attached to directly, or the album that owns the media object.
_DirectAlbum = aliased(Album, name="direct_album")
_OwnerAlbum = aliased(Album, name="owner_album")


class MetadataTagRepository:
    """Counts tag associations per tag name."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def count_tags(self, tag_filter: TagAssociationFilter) -> list[Tag]:
        """Return one Tag per tag name matching the filter, counting associations.

        An empty album_ids set matches nothing and skips the query.
        """
        if tag_filter.album_ids is not None and not tag_filter.album_ids:
            return []
        result = await self.db.execute(self._build_count_query(tag_filter))
        return [Tag(value=row[0], count=row[1]) for row in result.all()]

    def _build_count_query(self, tag_filter: TagAssociationFilter) -> Select:
        album_id = func.coalesce(Metadata.album_id, MediaObject.album_id)
        is_private = func.coalesce(_DirectAlbum.is_private, _OwnerAlbum.is_private)

        stmt = (
            select(MetadataTag.tag_name, func.count(MetadataTag.id))
            .select_from(MetadataTag)
            .join(Metadata, Metadata.id == MetadataTag.metadata_id)
            .outerjoin(MediaObject, MediaObject.id == Metadata.media_object_id)
            .outerjoin(_DirectAlbum, _DirectAlbum.id == Metadata.album_id)
            .outerjoin(_OwnerAlbum, _OwnerAlbum.id == MediaObject.album_id)
            .where(
                MetadataTag.gallery_id == tag_filter.gallery_id,
                Metadata.meta_name == tag_filter.category.value,
            )
        )

        if tag_filter.search_term:
            stmt = stmt.where(
                MetadataTag.tag_name.icontains(tag_filter.search_term, autoescape=True)
            )

        if tag_filter.kind == AssociationKind.ALBUM:
            stmt = stmt.where(Metadata.album_id.is_not(None))
        elif tag_filter.kind == AssociationKind.MEDIA_OBJECT:
            stmt = stmt.where(Metadata.media_object_id.is_not(None))
        elif tag_filter.kind is not None:
            raise UnsupportedOperationException("MetadataTagRepository.count_tags", tag_filter.kind)

        if tag_filter.album_ids is not None:
            stmt = stmt.where(album_id.in_(sorted(tag_filter.album_ids)))

        if tag_filter.public_only:
            stmt = stmt.where(is_private.is_(False))

        return stmt.group_by(MetadataTag.tag_name).order_by(MetadataTag.tag_name)
