"""SQLAlchemy Declarative Base — shared base class and audit columns for all ORM records.

Invariants:
    - All records inherit from Base
    - Base is the single source of truth for table metadata
    - Audit columns belong to storage only; core entities never carry them

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - deleted_at marks soft deletion; rows are never filtered implicitly
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all orgauth ORM records."""
    pass


class AuditMixin:
    """created_at / updated_at / deleted_at columns."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
