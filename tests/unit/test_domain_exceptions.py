"""Tests for domain exceptions (error_code, message, details)."""

from clinic_portal.domain.exceptions import (
    AuthenticationException,
    PortalException,
    SearchTimeoutException,
    SourceUnavailableException,
    SqlNotConfiguredException,
)


def test_portal_exception_default_error_code() -> None:
    """Base PortalException uses class name as error_code when not provided."""
    exc = PortalException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "PortalException"
    assert exc.details == {}


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.error_code == "AUTHENTICATION_ERROR"
    assert exc.message == "Authentication required"


def test_source_unavailable_exception() -> None:
    exc = SourceUnavailableException(["sops", "people"], reason="OperationalError")
    assert exc.error_code == "SOURCE_UNAVAILABLE"
    assert exc.details == {"sources": ["sops", "people"], "reason": "OperationalError"}
    assert "sops, people" in exc.message


def test_search_timeout_exception() -> None:
    exc = SearchTimeoutException(2.5)
    assert exc.error_code == "SEARCH_TIMEOUT"
    assert exc.details == {"timeout_seconds": 2.5}


def test_to_dict() -> None:
    assert SqlNotConfiguredException().to_dict() == {
        "error": "SQL_NOT_CONFIGURED",
        "message": "This operation requires a SQL database that is not configured.",
        "details": {},
    }
