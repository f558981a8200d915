"""Persistence models: read-only ORM projections of the clinic tables."""

from clinic_portal.infrastructure.persistence.models.absence import (
    LongTermAbsence,
    PlannedAbsence,
)
from clinic_portal.infrastructure.persistence.models.employee import (
    Employee,
    EmployeePreferences,
)
from clinic_portal.infrastructure.persistence.models.permission import (
    Permission,
    UserPermission,
)
from clinic_portal.infrastructure.persistence.models.schedule import (
    DailyOverride,
    Room,
    RosterShift,
    WeeklyPlan,
    WeeklyPlanAssignment,
)
from clinic_portal.infrastructure.persistence.models.sop import Sop, SopMember
from clinic_portal.infrastructure.persistence.models.training import (
    TrainingPresentation,
    TrainingVideo,
)

__all__ = [
    "DailyOverride",
    "Employee",
    "EmployeePreferences",
    "LongTermAbsence",
    "Permission",
    "PlannedAbsence",
    "Room",
    "RosterShift",
    "Sop",
    "SopMember",
    "TrainingPresentation",
    "TrainingVideo",
    "UserPermission",
    "WeeklyPlan",
    "WeeklyPlanAssignment",
]
