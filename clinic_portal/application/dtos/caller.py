"""Authorization context for the authenticated caller (no dependency on ORM).

Every capability and role question a source adapter or the overlay
engine asks is answered here, never from global session state.
"""

from dataclasses import dataclass, field

from clinic_portal.domain.enums import AppRole, RoleGroup, SystemRole

# Any of these capabilities lets the caller manage procedure documents.
SOP_MANAGE_CAPABILITIES = frozenset(
    {"perm.sop_manage", "perm.sop_publish", "sop.manage", "sop.publish"}
)


@dataclass(frozen=True)
class AuthorizationContext:
    """Caller identity, capabilities, and role-group visibility preference."""

    employee_id: int
    is_admin: bool = False
    app_role: AppRole = AppRole.USER
    system_role: SystemRole = SystemRole.EMPLOYEE
    training_enabled: bool = False
    capabilities: frozenset[str] = field(default_factory=frozenset)
    # None means the caller never set a preference: every group is visible.
    visible_role_groups: frozenset[RoleGroup] | None = None

    @property
    def is_technical_admin(self) -> bool:
        return self.system_role != SystemRole.EMPLOYEE

    @property
    def is_administrator(self) -> bool:
        """Admin flag, app role Admin, or any technical admin level."""
        return self.is_admin or self.app_role == AppRole.ADMIN or self.is_technical_admin

    def has_capability(self, capability: str) -> bool:
        return capability in self.capabilities

    @property
    def can_manage_sops(self) -> bool:
        return self.is_administrator or any(
            self.has_capability(capability) for capability in SOP_MANAGE_CAPABILITIES
        )

    @property
    def can_view_training(self) -> bool:
        return self.training_enabled or self.is_administrator

    def sees_role_group(self, group: RoleGroup | None) -> bool:
        """Return True if the caller's preference includes group (unset = all groups)."""
        if self.visible_role_groups is None:
            return True
        return group is not None and group in self.visible_role_groups
