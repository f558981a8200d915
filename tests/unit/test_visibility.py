"""Tests for the caller context and per-entity-type visibility rules."""

import pytest

from clinic_portal.application.dtos.caller import AuthorizationContext
from clinic_portal.application.dtos.records import (
    PersonRecord,
    SopRecord,
    TrainingVideoRecord,
)
from clinic_portal.application.services.visibility import (
    resolve_person,
    resolve_sop,
    resolve_training_media,
)
from clinic_portal.domain.enums import AppRole, RoleGroup, SystemRole


def _sop(status: str = "published", created_by_id: int | None = None) -> SopRecord:
    return SopRecord(
        id=10,
        title="Sectio Checkliste",
        category="Checkliste",
        version="1.2",
        status=status,
        content_markdown=None,
        created_by_id=created_by_id,
    )


def _person(person_id: int = 5, show_private_contact: bool = False) -> PersonRecord:
    return PersonRecord(
        id=person_id,
        name=None,
        first_name="Anna",
        last_name="Huber",
        role="Assistenzarzt",
        email_private="anna@privat.at",
        phone_private="0664 123",
        show_private_contact=show_private_contact,
    )


class TestAuthorizationContext:
    @pytest.mark.parametrize(
        "ctx",
        [
            AuthorizationContext(employee_id=1, is_admin=True),
            AuthorizationContext(employee_id=1, app_role=AppRole.ADMIN),
            AuthorizationContext(employee_id=1, system_role=SystemRole.DEPARTMENT_ADMIN),
        ],
    )
    def test_administrator_variants(self, ctx: AuthorizationContext) -> None:
        assert ctx.is_administrator
        assert ctx.can_manage_sops
        assert ctx.can_view_training

    def test_plain_employee(self) -> None:
        ctx = AuthorizationContext(employee_id=1)
        assert not ctx.is_administrator
        assert not ctx.can_manage_sops
        assert not ctx.can_view_training

    def test_sop_capability_grants_management(self) -> None:
        ctx = AuthorizationContext(employee_id=1, capabilities=frozenset({"sop.publish"}))
        assert ctx.has_capability("sop.publish")
        assert ctx.can_manage_sops
        assert not ctx.is_administrator

    def test_unrelated_capability_does_not_grant_management(self) -> None:
        ctx = AuthorizationContext(employee_id=1, capabilities=frozenset({"training.view"}))
        assert ctx.has_capability("training.view")
        assert not ctx.can_manage_sops

    def test_role_group_preference(self) -> None:
        """Unset preference sees every group; a set preference only its groups."""
        unset = AuthorizationContext(employee_id=1)
        assert unset.sees_role_group(RoleGroup.OA)
        assert unset.sees_role_group(None)

        only_ass = AuthorizationContext(
            employee_id=1, visible_role_groups=frozenset({RoleGroup.ASS})
        )
        assert only_ass.sees_role_group(RoleGroup.ASS)
        assert not only_ass.sees_role_group(RoleGroup.OA)
        assert not only_ass.sees_role_group(None)


class TestResolveSop:
    def test_published_visible_to_everyone(self) -> None:
        assert resolve_sop(_sop("published"), AuthorizationContext(employee_id=1)).is_candidate

    def test_draft_hidden_from_plain_employee(self) -> None:
        decision = resolve_sop(_sop("Entwurf", created_by_id=2), AuthorizationContext(employee_id=1))
        assert not decision.is_candidate

    def test_draft_visible_to_creator_member_and_manager(self) -> None:
        caller = AuthorizationContext(employee_id=1)
        assert resolve_sop(_sop("review", created_by_id=1), caller).is_candidate
        assert resolve_sop(_sop("review", created_by_id=2), caller, is_member=True).is_candidate
        manager = AuthorizationContext(employee_id=1, capabilities=frozenset({"perm.sop_manage"}))
        assert resolve_sop(_sop("review", created_by_id=2), manager).is_candidate


class TestResolveTrainingMedia:
    def test_requires_training_flag_or_admin(self) -> None:
        video = TrainingVideoRecord(id=1, title="CTG Basics", platform="YouTube")
        assert not resolve_training_media(video, AuthorizationContext(employee_id=1)).is_candidate
        assert resolve_training_media(
            video, AuthorizationContext(employee_id=1, training_enabled=True)
        ).is_candidate
        assert resolve_training_media(
            video, AuthorizationContext(employee_id=1, app_role=AppRole.ADMIN)
        ).is_candidate


class TestResolvePerson:
    def test_other_person_without_opt_in_masks_private_contact(self) -> None:
        decision = resolve_person(_person(5), AuthorizationContext(employee_id=1))
        assert decision.is_candidate
        assert not decision.may_see_private_contact

    def test_self_admin_and_opt_in_grant_private_contact(self) -> None:
        assert resolve_person(_person(1), AuthorizationContext(employee_id=1)).may_see_private_contact
        assert resolve_person(
            _person(5), AuthorizationContext(employee_id=1, is_admin=True)
        ).may_see_private_contact
        assert resolve_person(
            _person(5, show_private_contact=True), AuthorizationContext(employee_id=1)
        ).may_see_private_contact
