"""Employee and EmployeePreferences ORM models."""

from typing import Any

from sqlalchemy import JSON, Boolean, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_portal.infrastructure.persistence.database import Base
from clinic_portal.infrastructure.persistence.models.mixins import SerialIdMixin, TimestampMixin


class Employee(SerialIdMixin, TimestampMixin, Base):
    """Employee (personnel directory and caller identity). Table: employees."""

    __tablename__ = "employees"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    first_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    role: Mapped[str] = mapped_column(String, nullable=False)
    app_role: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text("'User'")
    )
    system_role: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text("'employee'")
    )
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    email_private: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone_work: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone_private: Mapped[str | None] = mapped_column(Text, nullable=True)
    show_private_contact: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
    is_admin: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )
    training_enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )

    __table_args__ = (Index("employees_is_active_idx", "is_active"),)


class EmployeePreferences(SerialIdMixin, TimestampMixin, Base):
    """Per-employee preferences. Table: employee_preferences (one row per employee)."""

    __tablename__ = "employee_preferences"

    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False, unique=True
    )
    # Role groups (OA, ASS, TA, SEK) whose absences this employee sees; NULL = all.
    visible_role_groups: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
