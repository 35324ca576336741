"""DTOs for application-wide settings stored in the app_setting table."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field


@dataclass(frozen=True)
class AppSettingRow:
    """One stored name/value pair (values are always stored as text)."""

    setting_name: str
    setting_value: str


class AppSettings(BaseModel):
    """Snapshot of application-wide settings.

    Defaults apply to settings that are not present in the data store.
    email_from_address is either empty (not configured) or a valid address.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    skin: str = "dark"
    media_object_download_buffer_size: int = 32768
    encrypt_media_object_url_on_client: bool = False
    enable_cache: bool = True
    allow_gallery_admin_to_manage_users_and_roles: bool = True
    allow_gallery_admin_to_view_all_users_and_roles: bool = True
    # 0 means no limit
    max_number_error_items: int = Field(200, ge=0)
    email_from_name: str = ""
    email_from_address: EmailStr | Literal[""] = ""
    smtp_server: str = ""
    smtp_server_port: str = ""
    send_email_using_ssl: bool = False
