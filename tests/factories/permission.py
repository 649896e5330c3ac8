"""Permission factory for tests."""

from uuid import uuid4

from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from citizen_services.core.database import RecordStatus
from citizen_services.core.permissions.models import Permission


class PermissionFactory(SQLAlchemyFactory[Permission]):
    """Factory for creating test Permission instances."""

    __model__ = Permission

    action = "read"
    description = None
    status = RecordStatus.ACTIVE

    @classmethod
    def entity_code(cls) -> str:
        """Generate an entity code."""
        return f"entity.things_{uuid4().hex[:6]}"

    @classmethod
    def code(cls) -> str:
        """Generate a unique code."""
        return f"things_{uuid4().hex[:8]}.read"

    @classmethod
    def label(cls) -> str:
        """Generate a label."""
        return f"Test Permission {uuid4().hex[:6]}"
