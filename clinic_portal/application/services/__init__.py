"""Application services: pure search/visibility/overlay logic and caller resolution."""

from clinic_portal.application.services.authorization_service import AuthorizationService
from clinic_portal.application.services.normalizer import normalize, normalize_text, tokenize
from clinic_portal.application.services.scorer import score_candidate, score_match

__all__ = [
    "AuthorizationService",
    "normalize",
    "normalize_text",
    "score_candidate",
    "score_match",
    "tokenize",
]
