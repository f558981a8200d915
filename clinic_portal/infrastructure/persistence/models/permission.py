"""Permission and UserPermission ORM models (capability grants)."""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from clinic_portal.infrastructure.persistence.database import Base
from clinic_portal.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    SerialIdMixin,
    TimestampMixin,
)


class Permission(SerialIdMixin, TimestampMixin, Base):
    """Capability key (e.g. perm.sop_manage). Table: permissions."""

    __tablename__ = "permissions"

    key: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    label: Mapped[str] = mapped_column(Text, nullable=False)


class UserPermission(CreatedAtMixin, Base):
    """Grant of a permission to an employee in a department. Table: user_permissions."""

    __tablename__ = "user_permissions"

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True
    )
    department_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    permission_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("permissions.id", ondelete="CASCADE"), primary_key=True
    )
