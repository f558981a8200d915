"""Authorization service: builds the caller's AuthorizationContext.

Combines the employee row and preferences (ICallerDirectory) with the
capability keys from IPermissionResolver. Built once per request and
never cached across requests.
"""

from __future__ import annotations

import logging

from clinic_portal.application.dtos.caller import AuthorizationContext
from clinic_portal.application.interfaces.repositories import ICallerDirectory
from clinic_portal.application.interfaces.services import IPermissionResolver
from clinic_portal.domain.enums import AppRole, RoleGroup, SystemRole

logger = logging.getLogger(__name__)


def _parse_role_groups(raw: tuple[str, ...] | None) -> frozenset[RoleGroup] | None:
    """Map stored group names to RoleGroup; unknown names are ignored.

    None, an empty list, or a list with no known group means no preference
    (every group visible), never "no group visible".
    """
    if not raw:
        return None
    groups = set()
    for value in raw:
        try:
            groups.add(RoleGroup(str(value).strip().upper()))
        except ValueError:
            logger.debug("Ignoring unknown role group in preference: %r", value)
    return frozenset(groups) or None


def _enum_or_default(enum_cls, value: str | None, default):
    try:
        return enum_cls(value)
    except ValueError:
        return default


class AuthorizationService:
    """Centralized caller resolution (one context per request)."""

    def __init__(
        self,
        caller_directory: ICallerDirectory,
        permission_resolver: IPermissionResolver,
    ) -> None:
        self.caller_directory = caller_directory
        self.permission_resolver = permission_resolver

    async def get_context(self, employee_id: int) -> AuthorizationContext | None:
        """Return the AuthorizationContext for an active employee, else None."""
        profile = await self.caller_directory.get_caller_profile(employee_id)
        if profile is None or not profile.is_active:
            return None
        capabilities = await self.permission_resolver.get_capabilities(employee_id)
        return AuthorizationContext(
            employee_id=profile.employee_id,
            is_admin=profile.is_admin,
            app_role=_enum_or_default(AppRole, profile.app_role, AppRole.USER),
            system_role=_enum_or_default(
                SystemRole, profile.system_role, SystemRole.EMPLOYEE
            ),
            training_enabled=profile.training_enabled,
            capabilities=frozenset(capabilities),
            visible_role_groups=_parse_role_groups(profile.visible_role_groups),
        )
