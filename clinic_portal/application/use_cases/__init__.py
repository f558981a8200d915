"""Use cases: global search and person schedule preview."""

from clinic_portal.application.use_cases.person_preview import PersonPreviewService
from clinic_portal.application.use_cases.search import GlobalSearchService
from clinic_portal.application.use_cases.sources import (
    PeopleSource,
    SopSource,
    TrainingPresentationSource,
    TrainingVideoSource,
)

__all__ = [
    "GlobalSearchService",
    "PeopleSource",
    "PersonPreviewService",
    "SopSource",
    "TrainingPresentationSource",
    "TrainingVideoSource",
]
