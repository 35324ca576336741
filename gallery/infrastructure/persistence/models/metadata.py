"""Metadata, Tag and MetadataTag ORM models (tag associations)."""

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gallery.infrastructure.persistence.database import Base
from gallery.infrastructure.persistence.models.mixins import GalleryMixin, IntIdMixin


class Metadata(IntIdMixin, Base):
    """Metadata item of an album or a media object (exactly one of the two). Table: metadata.

    meta_name holds the metadata item name; tag associations use the
    TagCategory values ('tags', 'people').
    """

    __tablename__ = "metadata"

    meta_name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    album_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("album.id", ondelete="CASCADE"), nullable=True, index=True
    )
    media_object_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("media_object.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        CheckConstraint(
            "(album_id IS NULL) <> (media_object_id IS NULL)",
            name="metadata_owner_check",
        ),
    )


class Tag(Base):
    """Distinct tag or person name. Table: tag."""

    __tablename__ = "tag"

    tag_name: Mapped[str] = mapped_column(String, primary_key=True)


class MetadataTag(IntIdMixin, GalleryMixin, Base):
    """Association of one tag name with one metadata item. Table: metadata_tag."""

    __tablename__ = "metadata_tag"

    metadata_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("metadata.id", ondelete="CASCADE"), nullable=False
    )
    tag_name: Mapped[str] = mapped_column(
        String, ForeignKey("tag.tag_name", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        Index("ix_metadata_tag_gallery_tag", "gallery_id", "tag_name"),
        Index("ix_metadata_tag_metadata", "metadata_id"),
    )
