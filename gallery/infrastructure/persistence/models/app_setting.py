"""AppSetting ORM model. Application-wide name/value settings."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gallery.infrastructure.persistence.database import Base
from gallery.infrastructure.persistence.models.mixins import IntIdMixin


class AppSetting(IntIdMixin, Base):
    """Application setting. Table: app_setting. Unique setting_name."""

    __tablename__ = "app_setting"

    setting_name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    setting_value: Mapped[str] = mapped_column(Text, nullable=False, default="")
