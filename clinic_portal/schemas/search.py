"""Global search API schemas."""

from datetime import datetime

from pydantic import Field

from clinic_portal.application.dtos.search import (
    GlobalSearchResult,
    PersonContacts,
    ScoredHit,
)
from clinic_portal.domain.enums import EntityType
from clinic_portal.schemas.base import CamelModel

# Singular hit type per group, as rendered by the frontend.
HIT_TYPES: dict[EntityType, str] = {
    EntityType.SOPS: "sop",
    EntityType.VIDEOS: "video",
    EntityType.PRESENTATIONS: "presentation",
    EntityType.PEOPLE: "person",
}


class PersonContactsResponse(CamelModel):
    """Contact block of a person hit; private fields are null unless granted."""

    email: str | None = None
    phone_work: str | None = None
    email_private: str | None = None
    phone_private: str | None = None
    show_private_contact: bool = False

    @classmethod
    def from_dto(cls, contacts: PersonContacts) -> "PersonContactsResponse":
        return cls(
            email=contacts.email,
            phone_work=contacts.phone_work,
            email_private=contacts.email_private,
            phone_private=contacts.phone_private,
            show_private_contact=contacts.show_private_contact,
        )


class SearchHitResponse(CamelModel):
    """One ranked hit. Creator fields are set for procedure documents; role,
    display name and contacts for people."""

    id: int
    type: str = Field(..., description="sop | video | presentation | person")
    title: str
    subtitle: str
    url: str
    score: int
    keywords: list[str] = Field(default_factory=list)
    created_by_id: int | None = None
    created_by_label: str | None = None
    created_by_current_user: bool = False
    created_at: datetime | None = None
    display_name: str | None = None
    role: str | None = None
    contacts: PersonContactsResponse | None = None

    @classmethod
    def from_dto(cls, hit: ScoredHit) -> "SearchHitResponse":
        is_person = hit.entity_type == EntityType.PEOPLE
        return cls(
            id=hit.id,
            type=HIT_TYPES[hit.entity_type],
            title=hit.title,
            subtitle=hit.subtitle,
            url=hit.url,
            score=hit.score,
            keywords=list(hit.keywords),
            created_by_id=hit.created_by_id,
            created_by_label=hit.created_by_label,
            created_by_current_user=hit.created_by_current_user,
            created_at=hit.created_at,
            display_name=hit.title if is_person else None,
            role=hit.role,
            contacts=PersonContactsResponse.from_dto(hit.contacts) if hit.contacts else None,
        )


class GlobalSearchResponse(CamelModel):
    """Response for GET /search/global: echoed query, grouped hits and per-group counts."""

    query: str
    groups: dict[str, list[SearchHitResponse]]
    counts: dict[str, int]

    @classmethod
    def from_result(cls, result: GlobalSearchResult) -> "GlobalSearchResponse":
        groups = {
            entity_type.value: [
                SearchHitResponse.from_dto(hit)
                for hit in result.groups[entity_type].hits
            ]
            if entity_type in result.groups
            else []
            for entity_type in EntityType
        }
        return cls(
            query=result.query,
            groups=groups,
            counts={name: len(hits) for name, hits in groups.items()},
        )
