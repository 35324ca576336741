"""Album and MediaObject ORM models."""

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gallery.infrastructure.persistence.database import Base
from gallery.infrastructure.persistence.models.mixins import (
    GalleryMixin,
    IntIdMixin,
    TimestampMixin,
)


class Album(IntIdMixin, GalleryMixin, TimestampMixin, Base):
    """Album. Table: album. parent_id is NULL only for the gallery's root album."""

    __tablename__ = "album"

    parent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("album.id", ondelete="CASCADE"), nullable=True
    )
    title: Mapped[str] = mapped_column(String, nullable=False, default="")
    is_private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    seq: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (Index("ix_album_gallery_parent", "gallery_id", "parent_id"),)


class MediaObject(IntIdMixin, TimestampMixin, Base):
    """Media object (photo, video, ...). Table: media_object. Belongs to one album."""

    __tablename__ = "media_object"

    album_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("album.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String, nullable=False, default="")
    seq: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
