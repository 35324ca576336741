"""Gallery ORM model. Root of the album hierarchy (no gallery_id)."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from gallery.infrastructure.persistence.database import Base
from gallery.infrastructure.persistence.models.mixins import IntIdMixin, TimestampMixin


class Gallery(IntIdMixin, TimestampMixin, Base):
    """Gallery. Table: gallery."""

    __tablename__ = "gallery"

    description: Mapped[str] = mapped_column(String, nullable=False, default="")
    allow_anonymous_browsing: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )
