"""Training media repository (implements ITrainingMediaReader)."""

from __future__ import annotations

from sqlalchemy import select

from clinic_portal.application.dtos.records import (
    TrainingPresentationRecord,
    TrainingVideoRecord,
)
from clinic_portal.infrastructure.persistence.models.training import (
    TrainingPresentation,
    TrainingVideo,
)
from clinic_portal.infrastructure.persistence.repositories.base import (
    BaseReader,
    keyword_tuple,
)


class TrainingMediaRepository(BaseReader):
    """Active training videos and presentations."""

    async def list_active_videos(self) -> list[TrainingVideoRecord]:
        stmt = (
            select(TrainingVideo)
            .where(TrainingVideo.is_active.is_(True))
            .order_by(TrainingVideo.id)
        )
        async with self.session() as session:
            rows = (await session.execute(stmt)).scalars().all()
        return [
            TrainingVideoRecord(
                id=row.id,
                title=row.title,
                platform=row.platform,
                keywords=keyword_tuple(row.keywords),
                created_at=row.created_at,
            )
            for row in rows
        ]

    async def list_active_presentations(self) -> list[TrainingPresentationRecord]:
        stmt = (
            select(TrainingPresentation)
            .where(TrainingPresentation.is_active.is_(True))
            .order_by(TrainingPresentation.id)
        )
        async with self.session() as session:
            rows = (await session.execute(stmt)).scalars().all()
        return [
            TrainingPresentationRecord(
                id=row.id,
                title=row.title,
                mime_type=row.mime_type,
                keywords=keyword_tuple(row.keywords),
                created_at=row.created_at,
            )
            for row in rows
        ]
