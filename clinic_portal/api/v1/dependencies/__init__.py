"""FastAPI dependencies (composition root).

Endpoints import from here only; no manual repository or service
construction in route modules.
"""

from .auth import (
    get_authorization_service,
    get_current_caller,
    get_current_caller_optional,
)
from .db import get_db_session_factory
from .people import get_person_preview_service, get_schedule_repo
from .search import (
    get_global_search_service,
    get_personnel_repo,
    get_sop_repo,
    get_training_media_repo,
)

__all__ = [
    "get_authorization_service",
    "get_current_caller",
    "get_current_caller_optional",
    "get_db_session_factory",
    "get_global_search_service",
    "get_person_preview_service",
    "get_personnel_repo",
    "get_schedule_repo",
    "get_sop_repo",
    "get_training_media_repo",
]
