"""Concurrent fan-out of independent store reads under one deadline.

Either every read completes and all results are returned, or the whole
call fails: one failing read cancels the rest and surfaces as
SourceUnavailableException, a missed deadline as SearchTimeoutException.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from clinic_portal.domain.exceptions import (
    PortalException,
    SearchTimeoutException,
    SourceUnavailableException,
)

logger = logging.getLogger(__name__)


async def _read(name: str, read: Callable[[], Awaitable[Any]]) -> Any:
    try:
        return await read()
    except PortalException:
        raise
    except Exception as exc:
        logger.warning("Store read %s failed: %s", name, exc)
        raise SourceUnavailableException([name], reason=type(exc).__name__) from exc


def _failed_names(group: BaseExceptionGroup) -> list[str]:
    names: list[str] = []
    for exc in group.exceptions:
        if isinstance(exc, SourceUnavailableException):
            names.extend(n for n in exc.details.get("sources", []) if n not in names)
    return names


async def gather_reads(
    reads: dict[str, Callable[[], Awaitable[Any]]],
    timeout_seconds: float,
) -> dict[str, Any]:
    """Run every read concurrently and return their results keyed by name.

    Args:
        reads: Read name -> zero-argument coroutine function.
        timeout_seconds: Deadline for the whole fan-out.

    Raises:
        SourceUnavailableException: One or more reads failed (names in details).
        SearchTimeoutException: The deadline passed; in-flight reads are cancelled.
    """
    tasks: dict[str, asyncio.Task] = {}
    try:
        async with asyncio.timeout(timeout_seconds):
            async with asyncio.TaskGroup() as tg:
                for name, read in reads.items():
                    tasks[name] = tg.create_task(_read(name, read))
    except TimeoutError:
        logger.warning("Store fan-out exceeded %ss (%d reads)", timeout_seconds, len(reads))
        raise SearchTimeoutException(timeout_seconds) from None
    except ExceptionGroup as group:
        failed = _failed_names(group)
        if failed:
            raise SourceUnavailableException(failed) from group
        raise group.exceptions[0] from group
    return {name: task.result() for name, task in tasks.items()}
