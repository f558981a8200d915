"""Infrastructure services."""

from clinic_portal.infrastructure.services.permission_resolver import PermissionResolver

__all__ = ["PermissionResolver"]
