"""SOP (procedure document) and SopMember ORM models."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_portal.infrastructure.persistence.database import Base
from clinic_portal.infrastructure.persistence.models.mixins import SerialIdMixin, TimestampMixin


class Sop(SerialIdMixin, TimestampMixin, Base):
    """Procedure document. Table: sops."""

    __tablename__ = "sops"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text("'SOP'")
    )
    version: Mapped[str] = mapped_column(
        Text, nullable=False, server_default=text("'1.0'")
    )
    status: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text("'proposed'")
    )
    content_markdown: Mapped[str | None] = mapped_column(Text, nullable=True)
    keywords: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
    created_by_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id"), nullable=False
    )
    archived_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)


class SopMember(Base):
    """Membership of an employee in a document. Table: sop_members."""

    __tablename__ = "sop_members"

    sop_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("sops.id", ondelete="CASCADE"), primary_key=True
    )
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True
    )
    role: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text("'read'")
    )
