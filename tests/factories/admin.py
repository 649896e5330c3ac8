"""Admin factory for tests."""

from uuid import uuid4

from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from citizen_services.core.database import AdminStatus
from citizen_services.core.permissions.models import Admin


# bcrypt hash of "testpassword123"
TEST_PASSWORD_HASH = "$2b$12$LQv3c1yqBWVHxkd0LHAkCOYz6TtxMQJqhN8/X4.xzQvGxRGlKHOHO"


class AdminFactory(SQLAlchemyFactory[Admin]):
    """Factory for creating test Admin instances.

    ``role_id`` must be passed explicitly; it has to reference a stored role.
    """

    __model__ = Admin

    password_hash = TEST_PASSWORD_HASH
    firstname = "Test"
    lastname = "Admin"
    country = "GHA"
    status = AdminStatus.ENABLED

    @classmethod
    def email(cls) -> str:
        """Generate a unique email."""
        return f"admin-{uuid4().hex[:8]}@example.gov"
