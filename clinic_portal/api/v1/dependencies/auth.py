"""Caller authentication dependencies (composition root).

Bearer JWT whose sub claim is the employee id. The caller's flags,
capabilities and preferences are loaded once per request.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from clinic_portal.application.dtos.caller import AuthorizationContext
from clinic_portal.application.services.authorization_service import AuthorizationService
from clinic_portal.domain.exceptions import (
    AuthenticationException,
    SourceUnavailableException,
)
from clinic_portal.infrastructure.persistence.repositories import PersonnelRepository
from clinic_portal.infrastructure.security.jwt import verify_token
from clinic_portal.infrastructure.services import PermissionResolver
from clinic_portal.shared.utils import parse_identifier

from .db import get_db_session_factory

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


def get_authorization_service(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_db_session_factory)
    ],
) -> AuthorizationService:
    """Authorization service backed by the personnel and permission tables."""
    return AuthorizationService(
        caller_directory=PersonnelRepository(session_factory),
        permission_resolver=PermissionResolver(session_factory),
    )


async def get_current_caller_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> AuthorizationContext | None:
    """Return the caller from the JWT if present and valid; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        logger.debug("Rejected bearer token: %s", e)
        return None
    employee_id = parse_identifier(payload.get("sub"))
    if employee_id is None:
        return None
    try:
        return await auth_svc.get_context(employee_id)
    except SQLAlchemyError as exc:
        logger.warning("Caller lookup failed: %s", exc)
        raise SourceUnavailableException(
            ["employees"], reason=type(exc).__name__
        ) from exc


async def get_current_caller(
    caller: Annotated[AuthorizationContext | None, Depends(get_current_caller_optional)],
) -> AuthorizationContext:
    """Return the authenticated caller; raise 401 if missing, invalid or inactive."""
    if caller is None:
        raise AuthenticationException()
    return caller
