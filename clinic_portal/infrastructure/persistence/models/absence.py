"""Absence ORM models: planned (short) and long-term absences."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_portal.infrastructure.persistence.database import Base
from clinic_portal.infrastructure.persistence.models.mixins import SerialIdMixin, TimestampMixin


class PlannedAbsence(SerialIdMixin, TimestampMixin, Base):
    """Table: planned_absences. Status Geplant / Genehmigt / Abgelehnt."""

    __tablename__ = "planned_absences"

    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str] = mapped_column(String, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text("'Geplant'")
    )


class LongTermAbsence(SerialIdMixin, TimestampMixin, Base):
    """Table: long_term_absences. Status Entwurf / Eingereicht / Genehmigt / Abgelehnt."""

    __tablename__ = "long_term_absences"

    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text("'Entwurf'")
    )
    approval_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
