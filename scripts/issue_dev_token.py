"""Issue a bearer token for an existing, active employee (local development).

Usage:
    python -m scripts.issue_dev_token <employee_id> [minutes]
Prints the token; pass it as "Authorization: Bearer <token>".
"""

import asyncio
import sys
from datetime import timedelta

from clinic_portal.core.config import get_settings
from clinic_portal.domain.exceptions import SqlNotConfiguredException
from clinic_portal.infrastructure.persistence.database import (
    dispose_engine,
    get_session_factory,
)
from clinic_portal.infrastructure.persistence.repositories import PersonnelRepository
from clinic_portal.infrastructure.security import create_access_token
from clinic_portal.shared.utils import parse_identifier


async def main() -> None:
    """Check the employee exists and is active, then print a token for them."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.issue_dev_token <employee_id> [minutes]",
            file=sys.stderr,
        )
        sys.exit(1)
    employee_id = parse_identifier(sys.argv[1])
    if employee_id is None:
        print(f"Not an employee id: {sys.argv[1]}", file=sys.stderr)
        sys.exit(1)
    minutes = int(sys.argv[2]) if len(sys.argv) > 2 else None

    get_settings()
    try:
        session_factory = get_session_factory()
    except SqlNotConfiguredException:
        print("DATABASE_URL is not set", file=sys.stderr)
        sys.exit(1)

    try:
        profile = await PersonnelRepository(session_factory).get_caller_profile(
            employee_id
        )
    finally:
        await dispose_engine()
    if profile is None or not profile.is_active:
        print(f"No active employee with id {employee_id}", file=sys.stderr)
        sys.exit(1)

    expires = timedelta(minutes=minutes) if minutes else None
    print(create_access_token(employee_id, expires_delta=expires))


if __name__ == "__main__":
    asyncio.run(main())
