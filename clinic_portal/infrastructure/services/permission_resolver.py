"""Resolves employee capabilities from DB (implements IPermissionResolver)."""

from __future__ import annotations

from sqlalchemy import select

from clinic_portal.infrastructure.persistence.models.permission import (
    Permission,
    UserPermission,
)
from clinic_portal.infrastructure.persistence.repositories.base import BaseReader


class PermissionResolver(BaseReader):
    """Resolves capability keys by joining user_permissions to permissions."""

    async def get_capabilities(self, employee_id: int) -> set[str]:
        """Return capability keys granted to the employee in any department."""
        query = (
            select(Permission.key)
            .select_from(UserPermission)
            .join(Permission, Permission.id == UserPermission.permission_id)
            .where(UserPermission.user_id == employee_id)
        )
        async with self.session() as session:
            result = await session.execute(query)
            return {row[0] for row in result.fetchall()}
