"""Global search use case: fan out to every source, score, rank and truncate.

Sources are queried concurrently under one deadline. A failing or late
source fails the whole search; a partial result would make "no matches"
indistinguishable from "source unavailable".
"""

from __future__ import annotations

import logging
import time
from functools import partial
from typing import TYPE_CHECKING
from urllib.parse import quote

from clinic_portal.application.dtos.records import (
    PersonRecord,
    SopRecord,
    TrainingPresentationRecord,
    TrainingVideoRecord,
)
from clinic_portal.application.dtos.search import (
    GlobalSearchResult,
    PersonContacts,
    ResultGroup,
    ScoredHit,
)
from clinic_portal.application.services.normalizer import (
    normalize,
    normalize_text,
    tokenize,
)
from clinic_portal.application.services.scorer import score_candidate
from clinic_portal.application.services.visibility import resolve_person
from clinic_portal.application.use_cases.fanout import gather_reads
from clinic_portal.domain.enums import EntityType
from clinic_portal.shared.telemetry import add_span_attributes, traced

if TYPE_CHECKING:
    from clinic_portal.application.dtos.caller import AuthorizationContext
    from clinic_portal.application.dtos.search import Candidate
    from clinic_portal.application.interfaces.services import ICandidateSource

logger = logging.getLogger(__name__)

SOP_SEARCH_PATH = "/wissen"
VIDEO_SEARCH_PATH = "/fortbildung/videos"
PRESENTATION_SEARCH_PATH = "/fortbildung/presentations"
PERSON_PATH = "/einstellungen"


def _search_url(path: str, query: str) -> str:
    return f"{path}?q={quote(normalize(query), safe='')}"


def render_hit(
    candidate: Candidate,
    score: int,
    query: str,
    caller: AuthorizationContext,
) -> ScoredHit:
    """Build the response hit for a scored candidate."""
    record = candidate.record
    if isinstance(record, SopRecord):
        subtitle = " • ".join(part for part in (record.category or "SOP", record.version) if part)
        return ScoredHit(
            entity_type=candidate.entity_type,
            id=record.id,
            title=record.title,
            subtitle=subtitle,
            url=_search_url(SOP_SEARCH_PATH, query),
            score=score,
            keywords=record.keywords,
            created_by_id=record.created_by_id,
            created_by_label=record.created_by_label if record.created_by_id else None,
            created_by_current_user=record.created_by_id == caller.employee_id,
            created_at=record.created_at,
        )
    if isinstance(record, TrainingVideoRecord):
        return ScoredHit(
            entity_type=candidate.entity_type,
            id=record.id,
            title=record.title,
            subtitle=record.platform or "Video",
            url=_search_url(VIDEO_SEARCH_PATH, query),
            score=score,
            keywords=record.keywords,
            created_at=record.created_at,
        )
    if isinstance(record, TrainingPresentationRecord):
        return ScoredHit(
            entity_type=candidate.entity_type,
            id=record.id,
            title=record.title,
            subtitle=record.mime_type or "Praesentation",
            url=_search_url(PRESENTATION_SEARCH_PATH, query),
            score=score,
            keywords=record.keywords,
            created_at=record.created_at,
        )
    if isinstance(record, PersonRecord):
        # Field exposure is checked again, independently of candidate eligibility.
        may_see_private = resolve_person(record, caller).may_see_private_contact
        return ScoredHit(
            entity_type=candidate.entity_type,
            id=record.id,
            title=candidate.title,
            subtitle=normalize(record.role),
            url=f"{PERSON_PATH}/{record.id}",
            score=score,
            role=normalize(record.role) or None,
            contacts=PersonContacts(
                email=normalize(record.email) or None,
                phone_work=normalize(record.phone_work) or None,
                email_private=(normalize(record.email_private) or None) if may_see_private else None,
                phone_private=(normalize(record.phone_private) or None) if may_see_private else None,
                show_private_contact=record.show_private_contact,
            ),
        )
    raise TypeError(f"Unsupported search record: {type(record).__name__}")


def rank_candidates(
    candidates: list[Candidate], tokens: list[str], limit: int
) -> list[tuple[Candidate, int]]:
    """Score, drop ineligible and duplicate ids, sort by score desc then title, keep the top limit."""
    scored = []
    seen: set[int] = set()
    for candidate in candidates:
        if candidate.id in seen:
            continue
        seen.add(candidate.id)
        score = score_candidate(candidate, tokens)
        if score is not None:
            scored.append((candidate, score))
    scored.sort(key=lambda item: (-item[1], normalize_text(item[0].title), item[0].id))
    return scored[:limit]


class GlobalSearchService:
    """Grouped, per-caller search over procedures, training media and people."""

    def __init__(
        self,
        sources: list[ICandidateSource],
        default_limit: int = 6,
        max_limit: int = 20,
        timeout_seconds: float = 10.0,
    ) -> None:
        self.sources = sources
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.timeout_seconds = timeout_seconds

    async def _fetch_all(
        self, caller: AuthorizationContext
    ) -> dict[EntityType, list[Candidate]]:
        reads = {
            source.entity_type.value: partial(source.fetch_candidates, caller)
            for source in self.sources
        }
        results = await gather_reads(reads, self.timeout_seconds)
        return {EntityType(name): candidates for name, candidates in results.items()}

    @traced("search.global")
    async def search(
        self,
        query: str | None,
        caller: AuthorizationContext | None,
        limit: int | None = None,
    ) -> GlobalSearchResult:
        """Return one ranked group per entity type for caller.

        An empty query or a missing caller yields every group empty without
        touching any record store.
        """
        echoed = normalize(query)
        tokens = tokenize(query)
        if caller is None or not tokens:
            return GlobalSearchResult.empty(echoed)

        limit = self.default_limit if limit is None else limit
        limit = min(max(limit, 1), self.max_limit)
        add_span_attributes(limit=limit, token_count=len(tokens))

        started = time.perf_counter()
        candidates_by_type = await self._fetch_all(caller)

        groups = {entity_type: ResultGroup(entity_type) for entity_type in EntityType}
        for entity_type, candidates in candidates_by_type.items():
            ranked = rank_candidates(candidates, tokens, limit)
            groups[entity_type] = ResultGroup(
                entity_type,
                tuple(render_hit(c, score, echoed, caller) for c, score in ranked),
            )
        result = GlobalSearchResult(query=echoed, groups=groups)

        logger.info(
            "Global search: tokens=%d counts=%s elapsed_ms=%.1f",
            len(tokens),
            {t.value: n for t, n in result.counts.items()},
            (time.perf_counter() - started) * 1000,
        )
        return result
