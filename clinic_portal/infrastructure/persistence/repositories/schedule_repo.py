"""Schedule repository (implements IScheduleReader).

Weekly plans, day overrides, roster duties and absences for one employee.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import and_, or_, select

from clinic_portal.application.dtos.schedule import (
    AbsenceRecord,
    DailyOverride,
    DutyRecord,
    EmployeeProfile,
    WeeklyAssignment,
)
from clinic_portal.domain.enums import AbsenceStatus
from clinic_portal.infrastructure.persistence.models.absence import (
    LongTermAbsence,
    PlannedAbsence,
)
from clinic_portal.infrastructure.persistence.models.employee import Employee
from clinic_portal.infrastructure.persistence.models.schedule import (
    DailyOverride as DailyOverrideModel,
    Room,
    RosterShift,
    WeeklyPlan,
    WeeklyPlanAssignment,
)
from clinic_portal.infrastructure.persistence.repositories.base import BaseReader


class ScheduleRepository(BaseReader):
    """Read side of the weekly plan, override, roster and absence tables."""

    async def get_employee(self, employee_id: int) -> EmployeeProfile | None:
        stmt = select(Employee.id, Employee.role, Employee.is_active).where(
            Employee.id == employee_id
        )
        async with self.session() as session:
            row = (await session.execute(stmt)).first()
        if row is None:
            return None
        return EmployeeProfile(id=row.id, role=row.role, is_active=row.is_active)

    async def get_weekly_assignments(
        self, employee_id: int, year: int, week: int
    ) -> list[WeeklyAssignment]:
        stmt = (
            select(
                WeeklyPlanAssignment.weekday,
                WeeklyPlanAssignment.room_id,
                WeeklyPlanAssignment.assignment_type,
                WeeklyPlanAssignment.is_blocked,
                Room.name.label("room_label"),
            )
            .join(WeeklyPlan, WeeklyPlan.id == WeeklyPlanAssignment.weekly_plan_id)
            .outerjoin(Room, Room.id == WeeklyPlanAssignment.room_id)
            .where(
                WeeklyPlan.year == year,
                WeeklyPlan.week_number == week,
                WeeklyPlanAssignment.employee_id == employee_id,
            )
            .order_by(
                WeeklyPlanAssignment.weekday,
                Room.weekly_plan_sort_order,
                WeeklyPlanAssignment.id,
            )
        )
        async with self.session() as session:
            rows = (await session.execute(stmt)).all()
        return [
            WeeklyAssignment(
                plan_year=year,
                plan_week=week,
                weekday=row.weekday,
                room_id=row.room_id,
                room_label=row.room_label,
                assignment_type=row.assignment_type,
                is_blocked=row.is_blocked,
            )
            for row in rows
        ]

    async def get_daily_overrides(
        self, employee_id: int, start: date, end: date
    ) -> list[DailyOverride]:
        stmt = (
            select(DailyOverrideModel, Room.name.label("room_label"))
            .outerjoin(Room, Room.id == DailyOverrideModel.room_id)
            .where(
                DailyOverrideModel.date.between(start, end),
                or_(
                    DailyOverrideModel.original_employee_id == employee_id,
                    DailyOverrideModel.new_employee_id == employee_id,
                ),
            )
            .order_by(DailyOverrideModel.date, DailyOverrideModel.id)
        )
        async with self.session() as session:
            rows = (await session.execute(stmt)).all()
        return [
            DailyOverride(
                date=override.date,
                room_id=override.room_id,
                room_label=room_label,
                original_employee_id=override.original_employee_id,
                new_employee_id=override.new_employee_id,
                reason=override.reason,
            )
            for override, room_label in rows
        ]

    async def get_duties(
        self, employee_id: int, start: date, end: date
    ) -> list[DutyRecord]:
        stmt = (
            select(RosterShift)
            .where(
                RosterShift.employee_id == employee_id,
                RosterShift.date.between(start, end),
            )
            .order_by(RosterShift.date, RosterShift.service_type, RosterShift.id)
        )
        async with self.session() as session:
            rows = (await session.execute(stmt)).scalars().all()
        return [
            DutyRecord(
                id=row.id, date=row.date, service_type=row.service_type, notes=row.notes
            )
            for row in rows
        ]

    async def get_absences(
        self, employee_id: int, start: date, end: date
    ) -> list[AbsenceRecord]:
        rejected = AbsenceStatus.REJECTED.value
        planned_stmt = select(PlannedAbsence).where(
            PlannedAbsence.employee_id == employee_id,
            PlannedAbsence.status != rejected,
            and_(PlannedAbsence.start_date <= end, PlannedAbsence.end_date >= start),
        )
        long_term_stmt = select(LongTermAbsence).where(
            LongTermAbsence.employee_id == employee_id,
            LongTermAbsence.status != rejected,
            and_(LongTermAbsence.start_date <= end, LongTermAbsence.end_date >= start),
        )
        async with self.session() as session:
            planned = (await session.execute(planned_stmt)).scalars().all()
            long_term = (await session.execute(long_term_stmt)).scalars().all()
        records = [
            AbsenceRecord(
                id=row.id,
                source="planned",
                employee_id=row.employee_id,
                start_date=row.start_date,
                end_date=row.end_date,
                reason=row.reason,
                status=row.status,
                notes=row.notes,
            )
            for row in planned
        ]
        records.extend(
            AbsenceRecord(
                id=row.id,
                source="long_term",
                employee_id=row.employee_id,
                start_date=row.start_date,
                end_date=row.end_date,
                reason=row.reason,
                status=row.status,
                notes=row.approval_notes,
            )
            for row in long_term
        )
        return sorted(records, key=lambda a: (a.start_date, a.end_date, a.source, a.id))
