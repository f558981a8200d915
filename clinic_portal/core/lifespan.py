"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring (logging, telemetry, DB engine
dispose); no business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from clinic_portal.core.config import get_settings
from clinic_portal.infrastructure.persistence import database
from clinic_portal.shared.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
    setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, telemetry (if enabled, including SQLAlchemy
    instrumentation when a database is configured). Shutdown: telemetry
    shutdown, SQL engine dispose.
    """
    settings = get_settings()
    setup_logging()

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig.from_settings(settings)
        if telemetry.start() is not None:
            telemetry.instrument(app, database.get_engine())
            set_telemetry(telemetry)
    else:
        logger.info("Telemetry disabled")

    logger.info(
        "%s %s started (database %s)",
        settings.app_name,
        settings.app_version,
        "configured" if settings.database_url else "not configured",
    )

    yield

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")

    if database.engine is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
