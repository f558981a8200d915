"""Application ports: reader protocols implemented by infrastructure."""

from clinic_portal.application.interfaces.repositories import (
    ICallerDirectory,
    IPersonnelReader,
    IScheduleReader,
    ISopReader,
    ITrainingMediaReader,
)
from clinic_portal.application.interfaces.services import (
    ICandidateSource,
    IPermissionResolver,
)

__all__ = [
    "ICallerDirectory",
    "ICandidateSource",
    "IPermissionResolver",
    "IPersonnelReader",
    "IScheduleReader",
    "ISopReader",
    "ITrainingMediaReader",
]
