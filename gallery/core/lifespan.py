"""Application lifespan: startup and shutdown.

Wiring only: logging, telemetry, application settings snapshot, DB engine
dispose.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from gallery.application.services.app_settings_service import AppSettingsStore
from gallery.core.config import get_settings
from gallery.infrastructure.persistence import database
from gallery.infrastructure.persistence.repositories import AppSettingRepository
from gallery.shared.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
    setup_logging,
)

logger = logging.getLogger(__name__)


async def load_app_settings_store() -> AppSettingsStore:
    """Read app_setting rows once; raises ConfigurationException on bad rows."""
    database.get_engine()
    async with database.AsyncSessionLocal() as session:
        return await AppSettingsStore.load(AppSettingRepository(session))


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, telemetry (if enabled), application settings.
    Shutdown order: telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_sqlalchemy(database.get_engine())
        telemetry.instrument_logging()
        logger.info("Telemetry initialized")

    app.state.app_settings = await load_app_settings_store()
    logger.info("Application settings loaded")

    yield

    # ---- Shutdown ----
    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")

    await database.dispose_engine()
