"""SQLAlchemy declarative base and common mixins."""

from datetime import datetime
from typing import TypeVar
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Enum, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from citizen_services.core.constants import MAX_STATUS_LENGTH
from citizen_services.core.database.enums import AdminStatus, RecordStatus


StatusT = TypeVar("StatusT", AdminStatus, RecordStatus)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class UUIDMixin:
    """Mixin that adds a UUID primary key."""

    id: Mapped[UUID] = mapped_column(
        primary_key=True,
        default=uuid4,
        index=True,
    )


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


def status_column(default: StatusT) -> Mapped[StatusT]:
    """Build a status column that persists the member value, never an ordinal.

    The enumeration is taken from ``default``. The column is a VARCHAR with a
    CHECK constraint, so adding a member only needs a constraint change in
    the migration that ships with it.
    """
    return mapped_column(
        Enum(
            type(default),
            native_enum=False,
            create_constraint=True,
            length=MAX_STATUS_LENGTH,
            values_callable=lambda enum: [member.value for member in enum],
            validate_strings=True,
        ),
        default=default,
        nullable=False,
    )
