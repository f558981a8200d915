"""Settings validation tests."""

import pytest
from pydantic import ValidationError

from clinic_portal.core.config import Settings


def test_secret_key_required(monkeypatch) -> None:
    monkeypatch.setenv("SECRET_KEY", "")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_database_url_optional(monkeypatch) -> None:
    monkeypatch.setenv("SECRET_KEY", "x")
    monkeypatch.setenv("DATABASE_URL", "")
    assert Settings(_env_file=None).database_url == ""


def test_search_limit_bounds(monkeypatch) -> None:
    monkeypatch.setenv("SECRET_KEY", "x")
    monkeypatch.setenv("SEARCH_DEFAULT_LIMIT", "30")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_placeholder_labels_casefolded(monkeypatch) -> None:
    monkeypatch.setenv("SECRET_KEY", "x")
    monkeypatch.setenv("PREVIEW_PLACEHOLDER_WORKPLACE_LABELS", " Dienst , -,,DIENSTHABENDE")
    assert Settings(_env_file=None).placeholder_workplace_labels == frozenset(
        {"dienst", "-", "diensthabende"}
    )
