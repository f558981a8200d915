"""Tests for the concurrent store-read fan-out."""

import asyncio

import pytest

from clinic_portal.application.use_cases.fanout import gather_reads
from clinic_portal.domain.exceptions import (
    AuthenticationException,
    SearchTimeoutException,
    SourceUnavailableException,
)


async def _value(value, delay: float = 0.0):
    await asyncio.sleep(delay)
    return value


async def _boom():
    raise ConnectionError("connection refused")


async def test_returns_every_result_by_name() -> None:
    results = await gather_reads(
        {"a": lambda: _value(1, 0.01), "b": lambda: _value([2, 3])},
        timeout_seconds=1,
    )
    assert results == {"a": 1, "b": [2, 3]}


async def test_reads_run_concurrently() -> None:
    """Three 0.2s reads finish well inside a 0.5s deadline only when run together."""
    results = await gather_reads(
        {name: (lambda n=name: _value(n, 0.2)) for name in ("a", "b", "c")},
        timeout_seconds=0.5,
    )
    assert sorted(results) == ["a", "b", "c"]


async def test_failing_read_raises_source_unavailable() -> None:
    cancelled = asyncio.Event()

    async def slow():
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            cancelled.set()
            raise

    with pytest.raises(SourceUnavailableException) as exc_info:
        await gather_reads({"sops": _boom, "people": slow}, timeout_seconds=1)

    assert exc_info.value.error_code == "SOURCE_UNAVAILABLE"
    assert exc_info.value.details["sources"] == ["sops"]
    assert cancelled.is_set()


async def test_deadline_raises_search_timeout() -> None:
    with pytest.raises(SearchTimeoutException) as exc_info:
        await gather_reads({"slow": lambda: _value(1, 1)}, timeout_seconds=0.05)
    assert exc_info.value.details == {"timeout_seconds": 0.05}


async def test_portal_exceptions_pass_through() -> None:
    async def unauthenticated():
        raise AuthenticationException()

    with pytest.raises(AuthenticationException):
        await gather_reads({"employees": unauthenticated}, timeout_seconds=1)


async def test_empty_reads() -> None:
    assert await gather_reads({}, timeout_seconds=1) == {}
