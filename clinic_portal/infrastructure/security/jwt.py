"""Bearer token handling for the caller boundary.

Production tokens are issued by the clinic's login service and only
verified here. The sub claim carries the employee id as a string.
create_access_token exists for local development and tests.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from clinic_portal.core.config import get_settings


def create_access_token(
    employee_id: int,
    expires_delta: timedelta | None = None,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Sign a token for employee_id.

    Args:
        employee_id: Employee the token identifies (becomes the sub claim).
        expires_delta: Optional TTL; else settings.access_token_expire_minutes.
        extra_claims: Optional additional claims (never override sub or exp).

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = dict(extra_claims or {})
    claims.update(sub=str(employee_id), exp=datetime.now(UTC) + ttl)
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry of a bearer token and return its claims.

    Raises:
        ValueError: If the token is malformed, badly signed, expired, or
            has no exp or sub claim.
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
