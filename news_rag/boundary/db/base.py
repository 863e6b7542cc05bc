"""
Declarative base, UTC clock and column mixins shared by the ORM models.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Registry for every mapped table; init_models creates from its metadata."""


class UUIDMixin:
    """UUID4 primary key, stored natively on PostgreSQL and as CHAR(32) on SQLite."""

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    """
    created_at / updated_at columns in UTC.

    ORM updates refresh updated_at automatically. Core statements (the
    document upsert) have to set it themselves.
    """

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
