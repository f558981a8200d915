"""Scheduling ORM models: rooms, weekly plans, daily overrides, roster shifts."""

import datetime

from sqlalchemy import Boolean, Date, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_portal.infrastructure.persistence.database import Base
from clinic_portal.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    SerialIdMixin,
    TimestampMixin,
)


class Room(SerialIdMixin, TimestampMixin, Base):
    """Workplace. Table: rooms."""

    __tablename__ = "rooms"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    weekly_plan_sort_order: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default=text("0")
    )


class WeeklyPlan(SerialIdMixin, TimestampMixin, Base):
    """Plan for one ISO year/week. Table: weekly_plans (unique year, week_number)."""

    __tablename__ = "weekly_plans"

    year: Mapped[int] = mapped_column(Integer, nullable=False)
    week_number: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text("'Entwurf'")
    )

    __table_args__ = (
        Index("weekly_plans_year_week_idx", "year", "week_number", unique=True),
    )


class WeeklyPlanAssignment(SerialIdMixin, TimestampMixin, Base):
    """Employee in a room on a weekday (1 = Monday). Table: weekly_plan_assignments."""

    __tablename__ = "weekly_plan_assignments"

    weekly_plan_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("weekly_plans.id"), nullable=False, index=True
    )
    room_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("rooms.id"), nullable=False, index=True
    )
    weekday: Mapped[int] = mapped_column(Integer, nullable=False)
    employee_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=True, index=True
    )
    assignment_type: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text("'Plan'")
    )
    is_blocked: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )


class DailyOverride(SerialIdMixin, CreatedAtMixin, Base):
    """One-day replacement in one room. Table: daily_overrides."""

    __tablename__ = "daily_overrides"

    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    room_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("rooms.id"), nullable=False
    )
    original_employee_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=True, index=True
    )
    new_employee_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=True, index=True
    )
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_by_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False
    )


class RosterShift(SerialIdMixin, CreatedAtMixin, Base):
    """Roster duty on one date. Table: roster_shifts."""

    __tablename__ = "roster_shifts"

    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    service_type: Mapped[str] = mapped_column(Text, nullable=False)
    employee_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
