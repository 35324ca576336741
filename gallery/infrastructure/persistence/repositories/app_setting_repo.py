"""Application setting repository (name/value rows)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.application.dtos.app_setting import AppSettingRow
from gallery.infrastructure.persistence.models.app_setting import AppSetting


class AppSettingRepository:
    """Reads and upserts app_setting rows. Caller owns the transaction."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_all(self) -> list[AppSettingRow]:
        """Return every stored setting, ordered by name."""
        result = await self.db.execute(select(AppSetting).order_by(AppSetting.setting_name))
        return [
            AppSettingRow(s.setting_name, s.setting_value) for s in result.scalars().all()
        ]

    async def save(self, rows: list[AppSettingRow]) -> None:
        """Insert new settings and update existing ones by name."""
        if not rows:
            return
        names = [r.setting_name for r in rows]
        result = await self.db.execute(
            select(AppSetting).where(AppSetting.setting_name.in_(names))
        )
        existing = {s.setting_name: s for s in result.scalars().all()}
        for row in rows:
            setting = existing.get(row.setting_name)
            if setting is None:
                self.db.add(
                    AppSetting(setting_name=row.setting_name, setting_value=row.setting_value)
                )
            else:
                setting.setting_value = row.setting_value
        await self.db.flush()
