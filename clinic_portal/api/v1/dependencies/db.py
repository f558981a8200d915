"""Database dependencies (composition root)."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from clinic_portal.infrastructure.persistence.database import get_session_factory


def get_db_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory for readers; each reader call opens its own session.

    Raises SqlNotConfiguredException (503) when DATABASE_URL is not set.
    """
    return get_session_factory()
