"""Training media ORM models (videos, presentations)."""

from typing import Any

from sqlalchemy import JSON, Boolean, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_portal.infrastructure.persistence.database import Base
from clinic_portal.infrastructure.persistence.models.mixins import SerialIdMixin, TimestampMixin


class TrainingVideo(SerialIdMixin, TimestampMixin, Base):
    """Table: training_videos."""

    __tablename__ = "training_videos"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    platform: Mapped[str | None] = mapped_column(Text, nullable=True)
    keywords: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )


class TrainingPresentation(SerialIdMixin, TimestampMixin, Base):
    """Table: training_presentations."""

    __tablename__ = "training_presentations"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    mime_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    keywords: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )
