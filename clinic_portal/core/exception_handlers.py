"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every error body has the
same shape: error (code), message, details, and the request_id the
client can quote when reporting a failed search or preview.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from clinic_portal.core.config import get_settings
from clinic_portal.domain.exceptions import PortalException
from clinic_portal.shared.telemetry.logging import request_id_var

logger = logging.getLogger(__name__)

# Domain error_code -> HTTP status; anything unmapped is a 500.
_ERROR_CODE_STATUS: dict[str, int] = {
    "AUTHENTICATION_ERROR": 401,
    "SOURCE_UNAVAILABLE": 503,
    "SEARCH_TIMEOUT": 504,
    "SQL_NOT_CONFIGURED": 503,
}


def _error_response(
    status_code: int,
    error: str,
    message: Any,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "details": details if details is not None else {},
            "request_id": request_id_var.get(),
        },
        headers=headers,
    )


def _portal_exception_handler(request: Request, exc: PortalException) -> JSONResponse:
    """Map a domain exception to its status; 401 responses carry a Bearer challenge."""
    status_code = _ERROR_CODE_STATUS.get(exc.error_code, 500)
    if status_code >= 500:
        logger.warning(
            "%s %s failed: %s %s", request.method, request.url.path, exc.error_code, exc.details
        )
    body = exc.to_dict()
    return _error_response(
        status_code,
        body["error"],
        body["message"],
        body["details"],
        headers={"WWW-Authenticate": "Bearer"} if status_code == 401 else None,
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(422, "VALIDATION_ERROR", "Request validation failed", exc.errors())


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes and methods (404, 405) in the common error shape."""
    return _error_response(exc.status_code, "HTTP_ERROR", exc.detail, headers=exc.headers)


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: PortalException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(PortalException, _portal_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
