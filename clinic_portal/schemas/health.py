"""Probe bodies for /health (liveness) and /health/ready (readiness)."""

from typing import Literal

from pydantic import BaseModel

DatabaseState = Literal["reachable", "unconfigured", "unreachable"]


class HealthResponse(BaseModel):
    """The process is up; says nothing about the record store."""

    status: Literal["ok"] = "ok"


class ReadinessResponse(HealthResponse):
    database: DatabaseState = "reachable"


class ReadinessErrorResponse(BaseModel):
    """503 body: searches and previews would fail until the database answers."""

    status: Literal["not_ready"] = "not_ready"
    database: DatabaseState
    message: str
