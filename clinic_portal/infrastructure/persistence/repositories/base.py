"""Base reader: per-call sessions and shared row conversions."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


def keyword_tuple(raw: Any) -> tuple[str, ...]:
    """Normalize a JSON keywords column to a tuple of non-empty strings."""
    if not isinstance(raw, list):
        return ()
    return tuple(str(k).strip() for k in raw if isinstance(k, str) and k.strip())


class BaseReader:
    """Read-only repository that opens one session per call.

    Readers are called concurrently by the search and preview fan-outs,
    and an AsyncSession must not be used by two tasks at once.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session
