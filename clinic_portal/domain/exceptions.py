"""Domain exceptions for the clinic portal.

Defines domain-level exceptions that represent failures the caller must
see. Low-risk input problems (limits, day counts, identifiers) are never
raised; they are clamped or defaulted where they are parsed. Presentation
layer maps these exceptions to HTTP responses in exception handlers.
"""

from typing import Any


class PortalException(Exception):
    """Base exception for all clinic portal errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. source, timeout).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class AuthenticationException(PortalException):
    """Raised when the caller cannot be authenticated (missing, invalid or expired token)."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class SourceUnavailableException(PortalException):
    """Raised when a record store read fails; the whole response fails with it.

    Callers cannot tell "no matches" from "source unavailable" in a partial
    response, so a failing source is never silently dropped from a result.
    """

    def __init__(self, sources: list[str], reason: str | None = None) -> None:
        """Initialize with the failing source names.

        Args:
            sources: Names of the sources whose reads failed (e.g. ['sops']).
            reason: Optional short description of the first failure.
        """
        details: dict[str, Any] = {"sources": sources}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"Record store unavailable: {', '.join(sources)}",
            "SOURCE_UNAVAILABLE",
            details,
        )


class SearchTimeoutException(PortalException):
    """Raised when a search or preview fan-out misses its deadline."""

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(
            f"Store reads did not complete within {timeout_seconds} seconds",
            "SEARCH_TIMEOUT",
            {"timeout_seconds": timeout_seconds},
        )


class SqlNotConfiguredException(PortalException):
    """Raised when a store read needs the SQL database but none is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SQL_NOT_CONFIGURED",
        )
