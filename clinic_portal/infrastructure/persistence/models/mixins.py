"""SQLAlchemy mixins shared by the read models (serial id, timestamps)."""

from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class SerialIdMixin:
    """Integer (serial) primary key, as used by every clinic table."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class CreatedAtMixin:
    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime, server_default=func.now(), nullable=False)


class TimestampMixin(CreatedAtMixin):
    """created_at and updated_at (server defaults)."""

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime,
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )
