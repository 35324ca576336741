"""GalleryRole and RoleAlbum ORM models (album view permissions)."""

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from gallery.infrastructure.persistence.database import Base
from gallery.infrastructure.persistence.models.mixins import IntIdMixin, TimestampMixin


class GalleryRole(IntIdMixin, TimestampMixin, Base):
    """Role. Table: gallery_role. Unique role_name.

    A role grants its permissions on the albums assigned through role_album
    and on all their descendants. allow_administer_site covers every album.
    """

    __tablename__ = "gallery_role"

    role_name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    allow_view_album: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    allow_administer_site: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )


class RoleAlbum(IntIdMixin, Base):
    """Many-to-many role-album. Table: role_album."""

    __tablename__ = "role_album"

    role_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("gallery_role.id", ondelete="CASCADE"), nullable=False
    )
    album_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("album.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (UniqueConstraint("role_id", "album_id", name="uq_role_album"),)
