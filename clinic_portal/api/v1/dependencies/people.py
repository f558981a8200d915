"""Person preview dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from clinic_portal.application.use_cases.person_preview import PersonPreviewService
from clinic_portal.core.config import get_settings
from clinic_portal.infrastructure.persistence.repositories import ScheduleRepository

from .db import get_db_session_factory


def get_schedule_repo(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_db_session_factory)
    ],
) -> ScheduleRepository:
    return ScheduleRepository(session_factory)


def get_person_preview_service(
    schedule_repo: Annotated[ScheduleRepository, Depends(get_schedule_repo)],
) -> PersonPreviewService:
    """Preview use case (weekly plan + overrides + roster + absences)."""
    settings = get_settings()
    return PersonPreviewService(
        schedule_reader=schedule_repo,
        default_days=settings.preview_default_days,
        max_days=settings.preview_max_days,
        timeout_seconds=settings.search_timeout_seconds,
        timezone_name=settings.preview_timezone,
        placeholder_labels=settings.placeholder_workplace_labels,
    )
