"""Liveness and readiness probes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from clinic_portal.core.config import get_settings
from clinic_portal.infrastructure.persistence.database import check_database
from clinic_portal.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Record store not usable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """200 once `SELECT 1` succeeds; 503 naming whether DATABASE_URL is unset or unreachable."""
    if await check_database():
        return ReadinessResponse()
    if not get_settings().database_url:
        error = ReadinessErrorResponse(
            database="unconfigured", message="DATABASE_URL is not set"
        )
    else:
        error = ReadinessErrorResponse(
            database="unreachable", message="Database did not answer SELECT 1"
        )
    return JSONResponse(status_code=503, content=error.model_dump())
