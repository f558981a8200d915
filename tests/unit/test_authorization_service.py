"""AuthorizationService unit tests with mocked caller directory and permission resolver."""

from unittest.mock import AsyncMock

import pytest

from clinic_portal.application.dtos.records import CallerProfile
from clinic_portal.application.dtos.schedule import EmployeeProfile
from clinic_portal.application.services.authorization_service import AuthorizationService
from clinic_portal.application.services.schedule_overlay import can_view_absences
from clinic_portal.domain.enums import AppRole, RoleGroup, SystemRole


def _profile(**overrides) -> CallerProfile:
    values = dict(
        employee_id=7,
        is_active=True,
        is_admin=False,
        app_role="User",
        system_role="employee",
        training_enabled=True,
        visible_role_groups=None,
    )
    values.update(overrides)
    return CallerProfile(**values)


@pytest.fixture
def auth_mocks():
    """AuthorizationService with AsyncMock directory and resolver."""
    directory = AsyncMock()
    resolver = AsyncMock()
    resolver.get_capabilities = AsyncMock(return_value={"perm.sop_manage"})
    service = AuthorizationService(caller_directory=directory, permission_resolver=resolver)
    return service, directory, resolver


async def test_active_employee_gets_context(auth_mocks) -> None:
    service, directory, resolver = auth_mocks
    directory.get_caller_profile = AsyncMock(
        return_value=_profile(app_role="Admin", system_role="clinic_admin")
    )
    ctx = await service.get_context(7)
    assert ctx is not None
    assert ctx.employee_id == 7
    assert ctx.app_role == AppRole.ADMIN
    assert ctx.system_role == SystemRole.CLINIC_ADMIN
    assert ctx.training_enabled is True
    assert ctx.capabilities == frozenset({"perm.sop_manage"})
    assert ctx.visible_role_groups is None
    resolver.get_capabilities.assert_awaited_once_with(7)


async def test_unknown_or_inactive_employee_yields_none(auth_mocks) -> None:
    """No context (and no capability lookup) for unknown or inactive employees."""
    service, directory, resolver = auth_mocks
    directory.get_caller_profile = AsyncMock(return_value=None)
    assert await service.get_context(7) is None
    directory.get_caller_profile = AsyncMock(return_value=_profile(is_active=False))
    assert await service.get_context(7) is None
    resolver.get_capabilities.assert_not_awaited()


async def test_unknown_enum_values_fall_back_to_defaults(auth_mocks) -> None:
    service, directory, _ = auth_mocks
    directory.get_caller_profile = AsyncMock(
        return_value=_profile(app_role="Superuser", system_role="root")
    )
    ctx = await service.get_context(7)
    assert ctx.app_role == AppRole.USER
    assert ctx.system_role == SystemRole.EMPLOYEE
    assert not ctx.is_administrator


async def test_role_group_preference_parsed_and_unknown_names_ignored(auth_mocks) -> None:
    service, directory, _ = auth_mocks
    directory.get_caller_profile = AsyncMock(
        return_value=_profile(visible_role_groups=("oa", " ASS ", "Putzdienst"))
    )
    ctx = await service.get_context(7)
    assert ctx.visible_role_groups == frozenset({RoleGroup.OA, RoleGroup.ASS})


@pytest.mark.parametrize("stored", [(), ("Putzdienst",)])
async def test_empty_role_group_preference_means_all_groups(auth_mocks, stored) -> None:
    service, directory, _ = auth_mocks
    directory.get_caller_profile = AsyncMock(
        return_value=_profile(visible_role_groups=stored)
    )
    ctx = await service.get_context(7)
    assert ctx.visible_role_groups is None
    assert can_view_absences(ctx, EmployeeProfile(id=2, role="Oberarzt"))
