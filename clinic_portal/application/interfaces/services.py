"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from clinic_portal.application.dtos.caller import AuthorizationContext
    from clinic_portal.application.dtos.search import Candidate
    from clinic_portal.domain.enums import EntityType


class ICandidateSource(Protocol):
    """One search source per entity type.

    fetch_candidates applies the entity type's visibility predicate before
    returning, so unauthorized records are never scored or counted.
    """

    entity_type: EntityType

    async def fetch_candidates(self, caller: AuthorizationContext) -> list[Candidate]:
        """Return the caller's visible candidates (empty list, not an error, when none)."""


class IPermissionResolver(Protocol):
    """Resolves capability keys granted to an employee."""

    async def get_capabilities(self, employee_id: int) -> set[str]:
        """Return capability keys (e.g. perm.sop_manage) for the employee."""
