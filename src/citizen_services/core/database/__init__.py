"""Database layer - session management, base models, and mixins."""

from citizen_services.core.database.base import (
    Base,
    TimestampMixin,
    UUIDMixin,
    status_column,
)
from citizen_services.core.database.enums import AdminStatus, RecordStatus
from citizen_services.core.database.session import (
    build_engine,
    build_session_factory,
    get_db,
    get_session_factory,
)


__all__ = [
    "AdminStatus",
    "Base",
    "RecordStatus",
    "TimestampMixin",
    "UUIDMixin",
    "build_engine",
    "build_session_factory",
    "get_db",
    "get_session_factory",
    "status_column",
]
