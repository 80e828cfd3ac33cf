"""
Chirpy Backend — User SQLAlchemy Model
=======================================

What:  ORM model representing the `users` table.
Who:   Used by UserService (create, reset) and by Alembic for migrations.

Table Design:
    - UUID primary key generated in Python, so the same model works on
      PostgreSQL and on the SQLite database the tests use
    - email: unique, NOT validated for format (any text is accepted)
    - created_at / updated_at: timezone-aware UTC, both set on insert
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chirpy.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """A registered chirper. Rows are removed only by the dev reset."""

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Nothing updates a user yet; kept in step with created_at on insert
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    email: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
