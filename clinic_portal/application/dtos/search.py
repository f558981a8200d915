"""DTOs for global search (no dependency on ORM).

All of these are per-request projections: built, ranked, truncated and
discarded within one search call.
"""

from dataclasses import dataclass, field
from datetime import datetime

from clinic_portal.application.dtos.records import (
    PersonRecord,
    SopRecord,
    TrainingPresentationRecord,
    TrainingVideoRecord,
)
from clinic_portal.domain.enums import EntityType

SourceRecord = SopRecord | TrainingVideoRecord | TrainingPresentationRecord | PersonRecord


@dataclass(frozen=True)
class VisibilityDecision:
    """Whether a record is a candidate for this caller, and which optional fields it may see."""

    is_candidate: bool
    may_see_private_contact: bool = False


HIDDEN = VisibilityDecision(is_candidate=False)
VISIBLE = VisibilityDecision(is_candidate=True)


@dataclass(frozen=True)
class Candidate:
    """A record that passed its entity type's visibility predicate.

    title, keywords and body are the raw searchable fields; the scorer
    normalizes them.
    """

    entity_type: EntityType
    id: int
    title: str
    keywords: tuple[str, ...]
    body: str
    record: SourceRecord
    visibility: VisibilityDecision


@dataclass(frozen=True)
class PersonContacts:
    """Contact block of a person hit. Private fields are None unless granted."""

    email: str | None
    phone_work: str | None
    email_private: str | None
    phone_private: str | None
    show_private_contact: bool


@dataclass(frozen=True)
class ScoredHit:
    """Ranked search hit with its rendering fields."""

    entity_type: EntityType
    id: int
    title: str
    subtitle: str
    url: str
    score: int
    keywords: tuple[str, ...] = ()
    created_by_id: int | None = None
    created_by_label: str | None = None
    created_by_current_user: bool = False
    created_at: datetime | None = None
    role: str | None = None
    contacts: PersonContacts | None = None


@dataclass(frozen=True)
class ResultGroup:
    """Ranked, truncated hits for one entity type."""

    entity_type: EntityType
    hits: tuple[ScoredHit, ...] = ()

    @property
    def count(self) -> int:
        # Post-truncation length: "exactly limit" and "more than limit" look the same.
        return len(self.hits)


@dataclass(frozen=True)
class GlobalSearchResult:
    """Search response payload: echoed query plus one group per entity type."""

    query: str
    groups: dict[EntityType, ResultGroup] = field(default_factory=dict)

    @property
    def counts(self) -> dict[EntityType, int]:
        return {entity_type: group.count for entity_type, group in self.groups.items()}

    @classmethod
    def empty(cls, query: str) -> "GlobalSearchResult":
        """Result with every group present and empty."""
        return cls(
            query=query,
            groups={entity_type: ResultGroup(entity_type) for entity_type in EntityType},
        )
