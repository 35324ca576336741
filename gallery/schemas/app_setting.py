"""Application settings API schemas."""

from pydantic import BaseModel, ConfigDict


class AppSettingsResponse(BaseModel):
    """Current application-wide settings."""

    model_config = ConfigDict(from_attributes=True)

    skin: str
    media_object_download_buffer_size: int
    encrypt_media_object_url_on_client: bool
    enable_cache: bool
    allow_gallery_admin_to_manage_users_and_roles: bool
    allow_gallery_admin_to_view_all_users_and_roles: bool
    max_number_error_items: int
    email_from_name: str
    email_from_address: str
    smtp_server: str
    smtp_server_port: str
    send_email_using_ssl: bool


class AppSettingsUpdateRequest(BaseModel):
    """Partial update; omitted fields keep their current value.

    Values are validated by the settings store (see AppSettings), so rule
    violations come back as VALIDATION_ERROR with the offending field.
    """

    model_config = ConfigDict(extra="forbid")

    skin: str | None = None
    media_object_download_buffer_size: int | None = None
    encrypt_media_object_url_on_client: bool | None = None
    enable_cache: bool | None = None
    allow_gallery_admin_to_manage_users_and_roles: bool | None = None
    allow_gallery_admin_to_view_all_users_and_roles: bool | None = None
    max_number_error_items: int | None = None
    email_from_name: str | None = None
    email_from_address: str | None = None
    smtp_server: str | None = None
    smtp_server_port: str | None = None
    send_email_using_ssl: bool | None = None
