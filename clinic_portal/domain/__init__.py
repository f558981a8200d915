"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from clinic_portal.domain.enums import (
    AbsenceStatus,
    AppRole,
    EntityType,
    RoleGroup,
    SopStatus,
    SystemRole,
)
from clinic_portal.domain.exceptions import (
    AuthenticationException,
    PortalException,
    SearchTimeoutException,
    SourceUnavailableException,
    SqlNotConfiguredException,
)

__all__ = [
    # Enums
    "AbsenceStatus",
    "AppRole",
    "EntityType",
    "RoleGroup",
    "SopStatus",
    "SystemRole",
    # Exceptions
    "AuthenticationException",
    "PortalException",
    "SearchTimeoutException",
    "SourceUnavailableException",
    "SqlNotConfiguredException",
]
