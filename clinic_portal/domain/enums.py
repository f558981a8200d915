"""Domain enumerations for the clinic portal.

Enums represent fixed sets of domain values. String values match the
values stored by the systems of record (several are German, as stored).
"""

from enum import Enum


class EntityType(str, Enum):
    """Search result group names, in response order."""

    SOPS = "sops"
    VIDEOS = "videos"
    PRESENTATIONS = "presentations"
    PEOPLE = "people"


class AppRole(str, Enum):
    """App-wide role (separate from medical roles)."""

    ADMIN = "Admin"
    EDITOR = "Editor"
    USER = "User"


class SystemRole(str, Enum):
    """Technical administration level. Anything but EMPLOYEE is a technical admin."""

    EMPLOYEE = "employee"
    DEPARTMENT_ADMIN = "department_admin"
    CLINIC_ADMIN = "clinic_admin"
    SYSTEM_ADMIN = "system_admin"


class SopStatus(str, Enum):
    """Procedure document lifecycle status."""

    DRAFT = "Entwurf"
    IN_REVIEW = "In Review"
    RELEASED = "Freigegeben"
    PROPOSED = "proposed"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class AbsenceStatus(str, Enum):
    """Status shared by planned and long-term absences."""

    DRAFT = "Entwurf"
    SUBMITTED = "Eingereicht"
    PLANNED = "Geplant"
    APPROVED = "Genehmigt"
    REJECTED = "Abgelehnt"


class RoleGroup(str, Enum):
    """Coarse personnel role classification used to gate absence visibility."""

    OA = "OA"
    ASS = "ASS"
    TA = "TA"
    SEK = "SEK"

    @classmethod
    def for_role(cls, role: str | None) -> "RoleGroup | None":
        """Return the role group for a medical role label, or None when unknown."""
        raw = (role or "").strip().upper()
        if not raw:
            return None
        if "OBER" in raw or "PRIMAR" in raw or "FACHARZT" in raw:
            return cls.OA
        if "ASSIST" in raw:
            return cls.ASS
        if "TURNUS" in raw or "STUDENT" in raw:
            return cls.TA
        if "SEKRETARIAT" in raw:
            return cls.SEK
        return None
