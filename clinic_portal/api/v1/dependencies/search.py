"""Global search dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from clinic_portal.application.use_cases.search import GlobalSearchService
from clinic_portal.application.use_cases.sources import (
    PeopleSource,
    SopSource,
    TrainingPresentationSource,
    TrainingVideoSource,
)
from clinic_portal.core.config import get_settings
from clinic_portal.infrastructure.persistence.repositories import (
    PersonnelRepository,
    SopRepository,
    TrainingMediaRepository,
)

from .db import get_db_session_factory

SessionFactory = Annotated[async_sessionmaker[AsyncSession], Depends(get_db_session_factory)]


def get_sop_repo(session_factory: SessionFactory) -> SopRepository:
    return SopRepository(session_factory)


def get_training_media_repo(session_factory: SessionFactory) -> TrainingMediaRepository:
    return TrainingMediaRepository(session_factory)


def get_personnel_repo(session_factory: SessionFactory) -> PersonnelRepository:
    return PersonnelRepository(session_factory)


def get_global_search_service(
    sop_repo: Annotated[SopRepository, Depends(get_sop_repo)],
    media_repo: Annotated[TrainingMediaRepository, Depends(get_training_media_repo)],
    personnel_repo: Annotated[PersonnelRepository, Depends(get_personnel_repo)],
) -> GlobalSearchService:
    """Search use case over procedures, training media and people."""
    settings = get_settings()
    return GlobalSearchService(
        sources=[
            SopSource(sop_repo),
            TrainingVideoSource(media_repo),
            TrainingPresentationSource(media_repo),
            PeopleSource(personnel_repo),
        ],
        default_limit=settings.search_default_limit,
        max_limit=settings.search_max_limit,
        timeout_seconds=settings.search_timeout_seconds,
    )
