"""Application-wide settings: explicit name -> field mapping and a process-wide store.

Stored settings are plain name/value text pairs. Each known name maps to
one AppSettings field; the model converts and validates the values.
Anything else is a configuration error reported at startup rather than
silently ignored.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from pydantic import ValidationError

from gallery.application.dtos.app_setting import AppSettingRow, AppSettings
from gallery.application.interfaces.repositories import IAppSettingRepository
from gallery.domain.exceptions import ConfigurationException, InvalidArgumentException

logger = logging.getLogger(__name__)

# Stored setting name -> AppSettings field.
SETTING_FIELDS: dict[str, str] = {
    "Skin": "skin",
    "MediaObjectDownloadBufferSize": "media_object_download_buffer_size",
    "EncryptMediaObjectUrlOnClient": "encrypt_media_object_url_on_client",
    "EnableCache": "enable_cache",
    "AllowGalleryAdminToManageUsersAndRoles": "allow_gallery_admin_to_manage_users_and_roles",
    "AllowGalleryAdminToViewAllUsersAndRoles": "allow_gallery_admin_to_view_all_users_and_roles",
    "MaxNumberErrorItems": "max_number_error_items",
    "EmailFromName": "email_from_name",
    "EmailFromAddress": "email_from_address",
    "SmtpServer": "smtp_server",
    "SmtpServerPort": "smtp_server_port",
    "SendEmailUsingSsl": "send_email_using_ssl",
}

_FIELD_TO_SETTING_NAME = {attr: name for name, attr in SETTING_FIELDS.items()}


def _first_error(exc: ValidationError) -> tuple[str | None, str]:
    """Return (field, message) of the first validation error."""
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    attr = str(loc[0]) if loc else None
    return attr, error.get("msg", str(exc))


def load_app_settings(rows: Iterable[AppSettingRow]) -> AppSettings:
    """Build AppSettings from stored rows.

    Raises:
        ConfigurationException: Unknown setting name or a value that fails validation.
    """
    values: dict[str, Any] = {}
    for row in rows:
        attr = SETTING_FIELDS.get(row.setting_name)
        if attr is None:
            raise ConfigurationException(
                f"Invalid application setting '{row.setting_name}': no such setting exists. "
                "Check the app_setting table.",
                setting_name=row.setting_name,
            )
        values[attr] = row.setting_value.strip()
    try:
        return AppSettings.model_validate(values)
    except ValidationError as exc:
        attr, message = _first_error(exc)
        setting_name = _FIELD_TO_SETTING_NAME.get(attr or "", attr)
        raise ConfigurationException(
            f"Invalid value for application setting '{setting_name}': {message}",
            setting_name=setting_name,
        ) from exc


def _to_stored_value(value: Any) -> str:
    if isinstance(value, bool):
        return "True" if value else "False"
    return str(value)


class AppSettingsStore:
    """Holds the current AppSettings snapshot for the process.

    Created once at startup (see lifespan) and shared by reference. Reads
    return an immutable snapshot; update() is the only writer and is
    serialized by a lock.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._current = settings or AppSettings()
        self._lock = asyncio.Lock()

    @property
    def current(self) -> AppSettings:
        return self._current

    @classmethod
    async def load(cls, repo: IAppSettingRepository) -> AppSettingsStore:
        """Read all stored settings and build the store. Raises ConfigurationException."""
        rows = await repo.get_all()
        settings = load_app_settings(rows)
        logger.info("Loaded %d application settings", len(rows))
        return cls(settings)

    async def update(
        self,
        repo: IAppSettingRepository,
        commit: Callable[[], Awaitable[None]],
        **changes: Any,
    ) -> AppSettings:
        """Validate, persist and commit the given changes; None values mean "unchanged".

        The snapshot is replaced only after commit() succeeds.

        Raises:
            InvalidArgumentException: Unknown setting or a value that fails validation.
        """
        applied = {k: v for k, v in changes.items() if v is not None}

        async with self._lock:
            current = self._current
            try:
                updated = AppSettings.model_validate(
                    {**current.model_dump(), **applied}, strict=True
                )
            except ValidationError as exc:
                attr, message = _first_error(exc)
                raise InvalidArgumentException(
                    f"Invalid application setting {attr}: {message}", field=attr
                ) from exc

            changed = [
                attr for attr in applied if getattr(current, attr) != getattr(updated, attr)
            ]
            if not changed:
                return current
            await repo.save(
                [
                    AppSettingRow(_FIELD_TO_SETTING_NAME[attr], _to_stored_value(getattr(updated, attr)))
                    for attr in changed
                ]
            )
            await commit()
            self._current = updated
            logger.info("Application settings updated: %s", ", ".join(sorted(changed)))
            return updated
