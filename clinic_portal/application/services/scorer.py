"""Field-weighted relevance scoring for search candidates.

A candidate is eligible only when every token occurs somewhere in its
combined searchable text (AND across tokens, OR across fields). Each
field is then scored per token and the field scores are combined with
fixed weights: title x4, keywords x2, combined text x1. Training media
are ranked on title and keywords only: no combined-text term.
"""

from clinic_portal.application.dtos.search import Candidate
from clinic_portal.application.services.normalizer import normalize, normalize_text
from clinic_portal.domain.enums import EntityType

TITLE_WEIGHT = 4
KEYWORD_WEIGHT = 2
BODY_WEIGHT = 1

PREFIX_POINTS = 5
WORD_START_POINTS = 3
SUBSTRING_POINTS = 1

TITLE_AND_KEYWORD_ONLY = frozenset({EntityType.VIDEOS, EntityType.PRESENTATIONS})


def score_match(haystack: str, tokens: list[str]) -> int:
    """Score a normalized string against tokens.

    Per token: +5 if the string starts with it, else +3 if it starts a
    later word, else +1 if it occurs anywhere. Only the best rule counts.
    """
    score = 0
    for token in tokens:
        if haystack.startswith(token):
            score += PREFIX_POINTS
        elif f" {token}" in haystack:
            score += WORD_START_POINTS
        elif token in haystack:
            score += SUBSTRING_POINTS
    return score


def includes_all_tokens(haystack: str, tokens: list[str]) -> bool:
    return all(token in haystack for token in tokens)


def searchable_text(candidate: Candidate) -> str:
    """Normalized title + keywords + body, the text eligibility is checked against."""
    keyword_text = " ".join(candidate.keywords)
    return normalize_text(
        f"{normalize(candidate.title)} {keyword_text} {normalize(candidate.body)}"
    )


def score_candidate(candidate: Candidate, tokens: list[str]) -> int | None:
    """Return the weighted score, or None when some token is missing from the candidate."""
    searchable = searchable_text(candidate)
    if not includes_all_tokens(searchable, tokens):
        return None
    score = (
        score_match(normalize_text(candidate.title), tokens) * TITLE_WEIGHT
        + score_match(normalize_text(" ".join(candidate.keywords)), tokens) * KEYWORD_WEIGHT
    )
    if candidate.entity_type not in TITLE_AND_KEYWORD_ONLY:
        score += score_match(searchable, tokens) * BODY_WEIGHT
    return score
