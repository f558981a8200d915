"""Read models returned by the record store readers (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SopRecord:
    """Procedure document (SOP, guideline, checklist, ...)."""

    id: int
    title: str
    category: str | None
    version: str | None
    status: str
    content_markdown: str | None
    keywords: tuple[str, ...] = ()
    created_by_id: int | None = None
    # Creator's display name, resolved by the reader (None when no creator).
    created_by_label: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class TrainingVideoRecord:
    """Active training video."""

    id: int
    title: str
    platform: str | None
    keywords: tuple[str, ...] = ()
    created_at: datetime | None = None


@dataclass(frozen=True)
class TrainingPresentationRecord:
    """Active training presentation."""

    id: int
    title: str
    mime_type: str | None
    keywords: tuple[str, ...] = ()
    created_at: datetime | None = None


@dataclass(frozen=True)
class PersonRecord:
    """Active employee as seen by the personnel directory."""

    id: int
    name: str | None
    first_name: str | None
    last_name: str | None
    role: str | None
    email: str | None = None
    email_private: str | None = None
    phone_work: str | None = None
    phone_private: str | None = None
    show_private_contact: bool = False


@dataclass(frozen=True)
class CallerProfile:
    """Employee row and preferences of the caller; capabilities are resolved separately."""

    employee_id: int
    is_active: bool
    is_admin: bool
    app_role: str
    system_role: str
    training_enabled: bool
    visible_role_groups: tuple[str, ...] | None = None
