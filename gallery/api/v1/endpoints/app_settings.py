"""Application settings API (site administrators only)."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.api.v1.dependencies import (
    Viewer,
    get_app_setting_repo,
    get_app_settings_store,
    require_site_admin,
)
from gallery.application.services.app_settings_service import AppSettingsStore
from gallery.infrastructure.persistence.database import get_db
from gallery.infrastructure.persistence.repositories import AppSettingRepository
from gallery.schemas.app_setting import AppSettingsResponse, AppSettingsUpdateRequest

router = APIRouter()


@router.get("", response_model=AppSettingsResponse)
async def get_app_settings(
    _: Annotated[Viewer, Depends(require_site_admin)],
    store: Annotated[AppSettingsStore, Depends(get_app_settings_store)],
) -> AppSettingsResponse:
    """Return the settings snapshot currently in effect."""
    return AppSettingsResponse.model_validate(store.current)


@router.patch("", response_model=AppSettingsResponse)
async def update_app_settings(
    body: AppSettingsUpdateRequest,
    _: Annotated[Viewer, Depends(require_site_admin)],
    store: Annotated[AppSettingsStore, Depends(get_app_settings_store)],
    repo: Annotated[AppSettingRepository, Depends(get_app_setting_repo)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AppSettingsResponse:
    """Validate, store and apply the given settings; omitted fields are unchanged."""
    updated = await store.update(repo, db.commit, **body.model_dump(exclude_none=True))
    return AppSettingsResponse.model_validate(updated)
