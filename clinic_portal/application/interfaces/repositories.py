"""Reader interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports. Every
reader is read-only and must be safe to call concurrently with the others.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from clinic_portal.application.dtos.records import (
        CallerProfile,
        PersonRecord,
        SopRecord,
        TrainingPresentationRecord,
        TrainingVideoRecord,
    )
    from clinic_portal.application.dtos.schedule import (
        AbsenceRecord,
        DailyOverride,
        DutyRecord,
        EmployeeProfile,
        WeeklyAssignment,
    )


class ISopReader(Protocol):
    """Protocol for the procedure document store."""

    async def list_sops(self, include_unpublished: bool) -> list[SopRecord]:
        """Return non-archived documents; only published ones unless include_unpublished."""

    async def list_sops_for_member(self, employee_id: int) -> list[SopRecord]:
        """Return non-archived documents the employee created or is a member of (any status)."""


class ITrainingMediaReader(Protocol):
    """Protocol for the training media store."""

    async def list_active_videos(self) -> list[TrainingVideoRecord]:
        """Return active training videos."""

    async def list_active_presentations(self) -> list[TrainingPresentationRecord]:
        """Return active training presentations."""


class IPersonnelReader(Protocol):
    """Protocol for the personnel directory."""

    async def list_active_people(self) -> list[PersonRecord]:
        """Return all active employees with contact fields (unmasked)."""


class ICallerDirectory(Protocol):
    """Protocol for loading the authenticated caller's profile and grants."""

    async def get_caller_profile(self, employee_id: int) -> CallerProfile | None:
        """Return employee flags and visibility preferences, or None if unknown."""


class IScheduleReader(Protocol):
    """Protocol for the weekly plan, override, roster and absence stores."""

    async def get_employee(self, employee_id: int) -> EmployeeProfile | None:
        """Return the employee or None if unknown."""

    async def get_weekly_assignments(
        self, employee_id: int, year: int, week: int
    ) -> list[WeeklyAssignment]:
        """Return the employee's weekly plan rows for one ISO year/week."""

    async def get_daily_overrides(
        self, employee_id: int, start: date, end: date
    ) -> list[DailyOverride]:
        """Return overrides in [start, end] that remove or add the employee."""

    async def get_duties(
        self, employee_id: int, start: date, end: date
    ) -> list[DutyRecord]:
        """Return roster duties of the employee in [start, end]."""

    async def get_absences(
        self, employee_id: int, start: date, end: date
    ) -> list[AbsenceRecord]:
        """Return absence windows overlapping [start, end] (rejected ones excluded)."""
