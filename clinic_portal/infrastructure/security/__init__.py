"""Security: token creation (dev/tests) and verification."""

from clinic_portal.infrastructure.security.jwt import create_access_token, verify_token

__all__ = ["create_access_token", "verify_token"]
