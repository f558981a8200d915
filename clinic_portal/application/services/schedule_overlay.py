"""Schedule overlay: recurring weekly plan + day-level overrides + absences.

Pure functions of already-loaded rows, so the whole overlay is testable
without a store. The effective workplaces for one employee on one date
are: the weekly plan rows for that ISO year/week/weekday, minus the rooms
an override removes the employee from that date, plus the rooms an
override adds the employee to that date. Overrides never touch the
recurring plan itself.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from clinic_portal.application.dtos.caller import AuthorizationContext
from clinic_portal.application.dtos.schedule import (
    AbsenceRecord,
    DailyOverride,
    EmployeeProfile,
    ResolvedWorkplace,
    ScheduleDay,
    WeeklyAssignment,
)
from clinic_portal.domain.enums import AbsenceStatus, RoleGroup


def day_range(start: date, days: int) -> tuple[date, ...]:
    """Return days consecutive dates starting at start (inclusive)."""
    return tuple(start + timedelta(days=offset) for offset in range(max(days, 0)))


def iso_key(day: date) -> tuple[int, int, int]:
    """Return (iso_year, iso_week, iso_weekday) with Monday = 1."""
    iso = day.isocalendar()
    return iso.year, iso.week, iso.weekday


def iso_weeks(days: Iterable[date]) -> list[tuple[int, int]]:
    """Distinct (iso_year, iso_week) pairs covered by days, in order."""
    weeks: list[tuple[int, int]] = []
    for day in days:
        year, week, _ = iso_key(day)
        if (year, week) not in weeks:
            weeks.append((year, week))
    return weeks


def base_assignments(
    day: date, assignments: Iterable[WeeklyAssignment]
) -> list[WeeklyAssignment]:
    """Weekly plan rows that apply to day (blocked rows never apply)."""
    year, week, weekday = iso_key(day)
    return [
        a
        for a in assignments
        if a.plan_year == year
        and a.plan_week == week
        and a.weekday == weekday
        and not a.is_blocked
    ]


def apply_overrides(
    day: date,
    employee_id: int,
    base: Iterable[WeeklyAssignment],
    overrides: Iterable[DailyOverride],
) -> list[ResolvedWorkplace]:
    """Apply the day's overrides to base: removals first, then additions."""
    todays = [o for o in overrides if o.date == day]
    removed_rooms = {o.room_id for o in todays if o.original_employee_id == employee_id}
    resolved = [
        ResolvedWorkplace(
            date=day,
            room_id=a.room_id,
            label=(a.room_label or "").strip(),
            assignment_type=a.assignment_type,
            source="plan",
        )
        for a in base
        if a.room_id not in removed_rooms
    ]
    resolved.extend(
        ResolvedWorkplace(
            date=day,
            room_id=o.room_id,
            label=(o.room_label or "").strip(),
            assignment_type="Plan",
            source="override",
        )
        for o in todays
        if o.new_employee_id == employee_id
    )
    return resolved


def dedupe_workplaces(
    workplaces: Iterable[ResolvedWorkplace],
    placeholder_labels: frozenset[str] = frozenset(),
) -> list[ResolvedWorkplace]:
    """Keep the first workplace per label; drop unlabeled and placeholder entries.

    placeholder_labels must already be case-folded.
    """
    seen: set[str] = set()
    result: list[ResolvedWorkplace] = []
    for workplace in workplaces:
        key = workplace.label.casefold()
        if not key or key in placeholder_labels or key in seen:
            continue
        seen.add(key)
        result.append(workplace)
    return result


def resolve_day_workplaces(
    day: date,
    employee_id: int,
    assignments: Iterable[WeeklyAssignment],
    overrides: Iterable[DailyOverride],
    placeholder_labels: frozenset[str] = frozenset(),
) -> list[ResolvedWorkplace]:
    """Effective, deduplicated workplaces of employee_id on day."""
    base = base_assignments(day, assignments)
    return dedupe_workplaces(
        apply_overrides(day, employee_id, base, overrides), placeholder_labels
    )


def can_view_absences(caller: AuthorizationContext, target: EmployeeProfile) -> bool:
    """Self and administrators always; otherwise the target's role group must be
    among the caller's visible role groups (no preference = all groups)."""
    if caller.employee_id == target.id or caller.is_administrator:
        return True
    return caller.sees_role_group(RoleGroup.for_role(target.role))


def visible_absences(
    absences: Iterable[AbsenceRecord], start: date, end: date
) -> list[AbsenceRecord]:
    """Absences overlapping [start, end], rejected ones removed, ordered by start date."""
    kept = [
        a
        for a in absences
        if a.status != AbsenceStatus.REJECTED.value
        and a.start_date <= end
        and a.end_date >= start
    ]
    return sorted(kept, key=lambda a: (a.start_date, a.end_date, a.id))


def build_schedule_days(
    days: Iterable[date],
    employee_id: int,
    assignments: list[WeeklyAssignment],
    overrides: list[DailyOverride],
    placeholder_labels: frozenset[str] = frozenset(),
) -> list[ScheduleDay]:
    """One ScheduleDay per date, in date order."""
    result = []
    for day in sorted(days):
        result.append(
            ScheduleDay(
                date=day,
                workplaces=tuple(
                    resolve_day_workplaces(
                        day, employee_id, assignments, overrides, placeholder_labels
                    )
                ),
            )
        )
    return result
