"""Closed enumerations shared by the store models and API schemas.

Members are persisted as their string value, never an ordinal. Keep each set
in lockstep with the CHECK constraint on the columns that use it.
"""

from enum import StrEnum


class RecordStatus(StrEnum):
    """Lifecycle of catalogue records: roles and permissions."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    DELETED = "deleted"


class AdminStatus(StrEnum):
    """Whether an admin account may be used."""

    ENABLED = "enabled"
    DISABLED = "disabled"
