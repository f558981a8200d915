"""SOP repository (implements ISopReader)."""

from __future__ import annotations

from sqlalchemy import Select, or_, select
from sqlalchemy.orm import aliased

from clinic_portal.application.dtos.records import SopRecord
from clinic_portal.application.services.normalizer import format_display_name
from clinic_portal.domain.enums import SopStatus
from clinic_portal.infrastructure.persistence.models.employee import Employee
from clinic_portal.infrastructure.persistence.models.sop import Sop, SopMember
from clinic_portal.infrastructure.persistence.repositories.base import (
    BaseReader,
    keyword_tuple,
)

_Creator = aliased(Employee, name="creator")


def _base_query() -> Select:
    """Non-archived documents joined with their creator's name fields."""
    return (
        select(Sop, _Creator.first_name, _Creator.last_name, _Creator.name)
        .outerjoin(_Creator, _Creator.id == Sop.created_by_id)
        .where(Sop.archived_at.is_(None), Sop.status != SopStatus.ARCHIVED.value)
        .order_by(Sop.id)
    )


def _to_record(sop: Sop, first_name, last_name, name) -> SopRecord:
    creator_label = None
    if sop.created_by_id is not None:
        creator_label = format_display_name(first_name, last_name, name)
    return SopRecord(
        id=sop.id,
        title=sop.title,
        category=sop.category,
        version=sop.version,
        status=sop.status,
        content_markdown=sop.content_markdown,
        keywords=keyword_tuple(sop.keywords),
        created_by_id=sop.created_by_id,
        created_by_label=creator_label,
        created_at=sop.created_at,
        updated_at=sop.updated_at,
    )


class SopRepository(BaseReader):
    """Procedure documents with their creator's display name."""

    async def list_sops(self, include_unpublished: bool) -> list[SopRecord]:
        stmt = _base_query()
        if not include_unpublished:
            stmt = stmt.where(Sop.status == SopStatus.PUBLISHED.value)
        async with self.session() as session:
            result = await session.execute(stmt)
            return [_to_record(*row) for row in result.all()]

    async def list_sops_for_member(self, employee_id: int) -> list[SopRecord]:
        member_sop_ids = select(SopMember.sop_id).where(
            SopMember.employee_id == employee_id
        )
        stmt = _base_query().where(
            or_(Sop.created_by_id == employee_id, Sop.id.in_(member_sop_ids))
        )
        async with self.session() as session:
            result = await session.execute(stmt)
            return [_to_record(*row) for row in result.all()]
