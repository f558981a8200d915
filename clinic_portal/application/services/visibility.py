"""Per-entity-type visibility rules: (record, caller) -> VisibilityDecision.

Stateless. Sources call these before scoring so hidden records are never
scored or counted; hit rendering calls resolve_person again before any
private contact field is copied into a response.
"""

from clinic_portal.application.dtos.caller import AuthorizationContext
from clinic_portal.application.dtos.records import (
    PersonRecord,
    SopRecord,
    TrainingPresentationRecord,
    TrainingVideoRecord,
)
from clinic_portal.application.dtos.search import HIDDEN, VISIBLE, VisibilityDecision
from clinic_portal.domain.enums import SopStatus


def resolve_sop(
    record: SopRecord,
    caller: AuthorizationContext,
    is_member: bool = False,
) -> VisibilityDecision:
    """Managers see every non-archived document; others see published ones,
    their own, and those they are a member of.

    Archived documents are filtered by the store query.
    """
    if caller.can_manage_sops:
        return VISIBLE
    if record.status == SopStatus.PUBLISHED.value:
        return VISIBLE
    if record.created_by_id == caller.employee_id or is_member:
        return VISIBLE
    return HIDDEN


def resolve_training_media(
    record: TrainingVideoRecord | TrainingPresentationRecord,
    caller: AuthorizationContext,
) -> VisibilityDecision:
    """Training media require the training flag or an administrative role."""
    return VISIBLE if caller.can_view_training else HIDDEN


def resolve_person(record: PersonRecord, caller: AuthorizationContext) -> VisibilityDecision:
    """Every active person is a candidate; private contact needs self, admin, or owner opt-in."""
    may_see_private = (
        record.id == caller.employee_id
        or caller.is_administrator
        or record.show_private_contact
    )
    return VisibilityDecision(is_candidate=True, may_see_private_contact=may_see_private)
