"""Application DTOs (read models and per-request projections)."""

from clinic_portal.application.dtos.caller import AuthorizationContext
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
    PersonPreview,
    ResolvedWorkplace,
    ScheduleDay,
    WeeklyAssignment,
)
from clinic_portal.application.dtos.search import (
    Candidate,
    GlobalSearchResult,
    PersonContacts,
    ResultGroup,
    ScoredHit,
    VisibilityDecision,
)

__all__ = [
    "AbsenceRecord",
    "AuthorizationContext",
    "CallerProfile",
    "Candidate",
    "DailyOverride",
    "DutyRecord",
    "EmployeeProfile",
    "GlobalSearchResult",
    "PersonContacts",
    "PersonPreview",
    "PersonRecord",
    "ResolvedWorkplace",
    "ResultGroup",
    "ScheduleDay",
    "ScoredHit",
    "SopRecord",
    "TrainingPresentationRecord",
    "TrainingVideoRecord",
    "VisibilityDecision",
    "WeeklyAssignment",
]
