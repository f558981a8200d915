"""Whole-request deadline.

Backstop above the per-search fan-out deadline: a request still running
after timeout_seconds is cancelled and answered with 504 REQUEST_TIMEOUT,
unless the response has already started. Runs inside RequestIDMiddleware,
so the body carries the request id like every other error. Raw ASGI.
"""

import asyncio
import json
import logging
from typing import Callable

from clinic_portal.shared.telemetry.logging import request_id_var

logger = logging.getLogger(__name__)


def _timeout_body(timeout_seconds: float) -> bytes:
    return json.dumps(
        {
            "error": "REQUEST_TIMEOUT",
            "message": f"Request exceeded {timeout_seconds}s",
            "details": {"timeout_seconds": timeout_seconds},
            "request_id": request_id_var.get(),
        }
    ).encode()


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Wrap app with a per-request deadline (asyncio.wait_for)."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = False

        async def tracking_send(message: dict) -> None:
            nonlocal started
            started = started or message["type"] == "http.response.start"
            await send(message)

        try:
            await asyncio.wait_for(app(scope, receive, tracking_send), timeout=timeout_seconds)
        except TimeoutError:
            logger.warning(
                "%s %s cancelled after %ss", scope.get("method"), scope.get("path"), timeout_seconds
            )
            if started:
                return
            await send(
                {
                    "type": "http.response.start",
                    "status": 504,
                    "headers": [(b"content-type", b"application/json")],
                }
            )
            await send({"type": "http.response.body", "body": _timeout_body(timeout_seconds)})

    return asgi_app
