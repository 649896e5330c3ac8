"""Permission store database models.

This module defines the tables the permission resolver reads:
- Role: a named set of permissions
- Permission: an ``<entity>.<action>`` code that can be granted
- roles_permissions: join table, a row means the role holds the permission
- Admin: an operator account bound to exactly one role
"""

from uuid import UUID

from sqlalchemy import Column, ForeignKey, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from citizen_services.core.constants import (
    COUNTRY_CODE_LENGTH,
    MAX_ACTION_LENGTH,
    MAX_CODE_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_ENTITY_CODE_LENGTH,
    MAX_LABEL_LENGTH,
    MAX_NAME_LENGTH,
)
from citizen_services.core.database.base import (
    Base,
    TimestampMixin,
    UUIDMixin,
    status_column,
)
from citizen_services.core.database.enums import AdminStatus, RecordStatus


# Grants are presence-based: there is no enabled/disabled flag on the row
roles_permissions = Table(
    "roles_permissions",
    Base.metadata,
    Column(
        "role_id", Uuid, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True
    ),
    Column(
        "permission_id",
        Uuid,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class Permission(Base, UUIDMixin, TimestampMixin):
    """Permission model representing an action on an entity.

    Attributes:
        label: Human-readable name
        code: Unique code in ``<entity>.<action>`` form (e.g. "requests.approve")
        entity_code: The protected entity (e.g. "entity.requests")
        action: The action being performed (e.g. "approve")
        description: Human-readable description of the permission
        status: Lifecycle status
    """

    __tablename__ = "permissions"

    label: Mapped[str] = mapped_column(
        String(MAX_LABEL_LENGTH),
        nullable=False,
    )
    code: Mapped[str] = mapped_column(
        String(MAX_CODE_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    entity_code: Mapped[str] = mapped_column(
        String(MAX_ENTITY_CODE_LENGTH),
        nullable=False,
    )
    action: Mapped[str] = mapped_column(
        String(MAX_ACTION_LENGTH),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        String(MAX_DESCRIPTION_LENGTH),
        nullable=True,
    )
    status: Mapped[RecordStatus] = status_column(RecordStatus.ACTIVE)

    def __repr__(self) -> str:
        return f"<Permission({self.code})>"


class Role(Base, UUIDMixin, TimestampMixin):
    """Role model representing a named set of permissions.

    Attributes:
        label: Human-readable name (e.g. "Super Admin")
        code: Unique code (e.g. "super_admin")
        description: Human-readable description of the role
        status: Lifecycle status
    """

    __tablename__ = "roles"

    label: Mapped[str] = mapped_column(
        String(MAX_LABEL_LENGTH),
        nullable=False,
    )
    code: Mapped[str] = mapped_column(
        String(MAX_CODE_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(
        String(MAX_DESCRIPTION_LENGTH),
        nullable=True,
    )
    status: Mapped[RecordStatus] = status_column(RecordStatus.ACTIVE)

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, code={self.code})>"


class Admin(Base, UUIDMixin, TimestampMixin):
    """Administrator account.

    Every admin holds exactly one role; the role decides what the admin
    may do through the permissions granted to it.

    Attributes:
        email: Unique, lower-cased email address
        password_hash: Bcrypt-hashed password
        firstname: Given name
        lastname: Family name
        country: ISO 3166-1 alpha-3 country code
        role_id: The admin's role
        status: Lifecycle status
    """

    __tablename__ = "admins"

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    firstname: Mapped[str | None] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=True,
    )
    lastname: Mapped[str | None] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=True,
    )
    country: Mapped[str] = mapped_column(
        String(COUNTRY_CODE_LENGTH),
        nullable=False,
    )
    role_id: Mapped[UUID] = mapped_column(
        ForeignKey("roles.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    status: Mapped[AdminStatus] = status_column(AdminStatus.ENABLED)

    def __repr__(self) -> str:
        return f"<Admin(id={self.id}, email={self.email}, role_id={self.role_id})>"
