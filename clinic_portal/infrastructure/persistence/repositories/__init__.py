"""Repositories: read-only implementations of the application reader ports."""

from clinic_portal.infrastructure.persistence.repositories.personnel_repo import (
    PersonnelRepository,
)
from clinic_portal.infrastructure.persistence.repositories.schedule_repo import (
    ScheduleRepository,
)
from clinic_portal.infrastructure.persistence.repositories.sop_repo import SopRepository
from clinic_portal.infrastructure.persistence.repositories.training_media_repo import (
    TrainingMediaRepository,
)

__all__ = [
    "PersonnelRepository",
    "ScheduleRepository",
    "SopRepository",
    "TrainingMediaRepository",
]
