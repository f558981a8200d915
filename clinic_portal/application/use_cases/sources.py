"""Search sources: one adapter per entity type.

Each source reads its record store, applies the entity type's visibility
predicate, and returns Candidates. Hidden records never leave the source,
so they are never scored or counted.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from clinic_portal.application.dtos.search import Candidate
from clinic_portal.application.services.normalizer import format_display_name, normalize
from clinic_portal.application.services.visibility import (
    resolve_person,
    resolve_sop,
    resolve_training_media,
)
from clinic_portal.domain.enums import EntityType
from clinic_portal.shared.telemetry import traced

if TYPE_CHECKING:
    from clinic_portal.application.dtos.caller import AuthorizationContext
    from clinic_portal.application.dtos.records import PersonRecord, SopRecord
    from clinic_portal.application.interfaces.repositories import (
        IPersonnelReader,
        ISopReader,
        ITrainingMediaReader,
    )


def person_display_name(record: PersonRecord) -> str:
    return format_display_name(record.first_name, record.last_name, record.name)


def _dedupe_by_id(records: list[SopRecord]) -> list[SopRecord]:
    seen: set[int] = set()
    unique = []
    for record in records:
        if record.id in seen:
            continue
        seen.add(record.id)
        unique.append(record)
    return unique


class SopSource:
    """Procedure documents visible to the caller."""

    entity_type = EntityType.SOPS

    def __init__(self, reader: ISopReader) -> None:
        self.reader = reader

    @traced("search.source.sops")
    async def fetch_candidates(self, caller: AuthorizationContext) -> list[Candidate]:
        if caller.can_manage_sops:
            records = await self.reader.list_sops(include_unpublished=True)
            member_ids: set[int] = set()
        else:
            async with asyncio.TaskGroup() as tg:
                published = tg.create_task(self.reader.list_sops(include_unpublished=False))
                own = tg.create_task(self.reader.list_sops_for_member(caller.employee_id))
            member_ids = {record.id for record in own.result()}
            records = _dedupe_by_id([*published.result(), *own.result()])

        candidates = []
        for record in records:
            visibility = resolve_sop(record, caller, is_member=record.id in member_ids)
            if not visibility.is_candidate:
                continue
            candidates.append(
                Candidate(
                    entity_type=self.entity_type,
                    id=record.id,
                    title=normalize(record.title),
                    keywords=record.keywords,
                    body=normalize(record.content_markdown),
                    record=record,
                    visibility=visibility,
                )
            )
        return candidates


class TrainingVideoSource:
    """Active training videos; empty without a store read when the caller lacks access."""

    entity_type = EntityType.VIDEOS

    def __init__(self, reader: ITrainingMediaReader) -> None:
        self.reader = reader

    @traced("search.source.videos")
    async def fetch_candidates(self, caller: AuthorizationContext) -> list[Candidate]:
        if not caller.can_view_training:
            return []
        candidates = []
        for record in await self.reader.list_active_videos():
            visibility = resolve_training_media(record, caller)
            if visibility.is_candidate:
                candidates.append(
                    Candidate(
                        entity_type=self.entity_type,
                        id=record.id,
                        title=normalize(record.title),
                        keywords=record.keywords,
                        body="",
                        record=record,
                        visibility=visibility,
                    )
                )
        return candidates


class TrainingPresentationSource:
    """Active training presentations; same access rule as videos."""

    entity_type = EntityType.PRESENTATIONS

    def __init__(self, reader: ITrainingMediaReader) -> None:
        self.reader = reader

    @traced("search.source.presentations")
    async def fetch_candidates(self, caller: AuthorizationContext) -> list[Candidate]:
        if not caller.can_view_training:
            return []
        candidates = []
        for record in await self.reader.list_active_presentations():
            visibility = resolve_training_media(record, caller)
            if visibility.is_candidate:
                candidates.append(
                    Candidate(
                        entity_type=self.entity_type,
                        id=record.id,
                        title=normalize(record.title),
                        keywords=record.keywords,
                        body="",
                        record=record,
                        visibility=visibility,
                    )
                )
        return candidates


class PeopleSource:
    """Active employees, searchable by name, role and work contact."""

    entity_type = EntityType.PEOPLE

    def __init__(self, reader: IPersonnelReader) -> None:
        self.reader = reader

    @traced("search.source.people")
    async def fetch_candidates(self, caller: AuthorizationContext) -> list[Candidate]:
        candidates = []
        for record in await self.reader.list_active_people():
            visibility = resolve_person(record, caller)
            if not visibility.is_candidate:
                continue
            candidates.append(
                Candidate(
                    entity_type=self.entity_type,
                    id=record.id,
                    title=person_display_name(record),
                    keywords=(),
                    # Work contact only: private fields must not make a person findable.
                    body=" ".join(
                        normalize(value)
                        for value in (record.role, record.email, record.phone_work)
                    ),
                    record=record,
                    visibility=visibility,
                )
            )
        return candidates
