"""DTOs for the person schedule preview (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import date
from typing import Literal


@dataclass(frozen=True)
class EmployeeProfile:
    """Target employee of a preview."""

    id: int
    role: str | None
    is_active: bool = True


@dataclass(frozen=True)
class WeeklyAssignment:
    """Recurring weekly plan row for one employee (ISO year/week, weekday 1=Monday)."""

    plan_year: int
    plan_week: int
    weekday: int
    room_id: int
    room_label: str | None
    assignment_type: str = "Plan"
    is_blocked: bool = False


@dataclass(frozen=True)
class DailyOverride:
    """Day-level exception on one room: original employee removed and/or new employee added."""

    date: date
    room_id: int
    room_label: str | None
    original_employee_id: int | None
    new_employee_id: int | None
    reason: str | None = None


@dataclass(frozen=True)
class AbsenceRecord:
    """Absence window (inclusive) from the planned or long-term absence stores."""

    id: int
    source: Literal["planned", "long_term"]
    employee_id: int
    start_date: date
    end_date: date
    reason: str
    status: str
    notes: str | None = None


@dataclass(frozen=True)
class DutyRecord:
    """Roster duty (service) of the employee on one date."""

    id: int
    date: date
    service_type: str
    notes: str | None = None


@dataclass(frozen=True)
class ResolvedWorkplace:
    """Effective workplace for one date after overlaying overrides on the weekly plan."""

    date: date
    room_id: int
    label: str
    assignment_type: str
    source: Literal["plan", "override"]


@dataclass(frozen=True)
class ScheduleDay:
    """One day of the overlay: the resolved workplaces."""

    date: date
    workplaces: tuple[ResolvedWorkplace, ...] = ()


@dataclass(frozen=True)
class PersonPreview:
    """Preview payload. absences is empty whenever absences_visible is False."""

    employee_id: int | None
    days: tuple[date, ...] = ()
    duties: tuple[DutyRecord, ...] = ()
    workplaces: tuple[ResolvedWorkplace, ...] = ()
    absences: tuple[AbsenceRecord, ...] = ()
    absences_visible: bool = False

    @classmethod
    def empty(cls, employee_id: int | None, days: tuple[date, ...]) -> "PersonPreview":
        """Well-formed preview with the requested days and nothing else."""
        return cls(employee_id=employee_id, days=days)
