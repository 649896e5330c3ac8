"""Permission resolution logic.

This module answers "may this admin do X?" by reading the permission
store: admin -> role -> granted permission codes. Every call reads the
store afresh, so a revoked grant takes effect on the very next check.

Store failures never escape the resolver. A lookup that cannot be answered
is logged and reported as "no permission" (or "no role"), so a broken store
can only ever deny access.
"""

from uuid import UUID

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from citizen_services.core.permissions.models import (
    Admin,
    Permission,
    roles_permissions,
)


logger = structlog.get_logger()


def _as_uuid(value: UUID | str) -> UUID | None:
    """Parse an identifier, returning None when it is not a UUID."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


class PermissionResolver:
    """Service for resolving admin permissions.

    The resolver owns no connection state of its own. Each lookup opens a
    short-lived session from the injected factory, which lets independent
    checks run concurrently.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def role_has_permission(
        self, role_id: UUID | str, permission_code: str
    ) -> bool:
        """Check if a role has been granted a permission.

        Args:
            role_id: The role's UUID
            permission_code: The permission code (e.g. "requests.approve")

        Returns:
            True if a grant joins the role to a permission with that code,
            False otherwise, including when the lookup fails
        """
        role_uuid = _as_uuid(role_id)
        if role_uuid is None:
            return False

        stmt = (
            select(func.count())
            .select_from(roles_permissions)
            .join(Permission, roles_permissions.c.permission_id == Permission.id)
            .where(
                roles_permissions.c.role_id == role_uuid,
                Permission.code == permission_code,
            )
        )
        try:
            async with self.session_factory() as session:
                count = (await session.execute(stmt)).scalar_one()
        except Exception:
            logger.exception(
                "permission_lookup_failed",
                role_id=str(role_id),
                permission=permission_code,
            )
            return False

        return count > 0

    async def get_role_permissions(self, role_id: UUID | str) -> list[str]:
        """Get all permission codes granted to a role.

        Args:
            role_id: The role's UUID

        Returns:
            Sorted list of permission codes, empty when the lookup fails
        """
        role_uuid = _as_uuid(role_id)
        if role_uuid is None:
            return []

        stmt = (
            select(Permission.code)
            .join(roles_permissions, roles_permissions.c.permission_id == Permission.id)
            .where(roles_permissions.c.role_id == role_uuid)
            .order_by(Permission.code)
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return list(result.scalars().all())
        except Exception:
            logger.exception("role_permissions_lookup_failed", role_id=str(role_id))
            return []

    async def get_admin_role_id(self, admin_id: UUID | str) -> UUID | None:
        """Get the role an admin holds.

        Args:
            admin_id: The admin's UUID

        Returns:
            The role UUID, or None if the admin does not exist or the
            lookup fails
        """
        admin_uuid = _as_uuid(admin_id)
        if admin_uuid is None:
            return None

        stmt = select(Admin.role_id).where(Admin.id == admin_uuid)
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return result.scalar_one_or_none()
        except Exception:
            logger.exception("admin_role_lookup_failed", admin_id=str(admin_id))
            return None

    async def admin_has_permission(
        self, admin_id: UUID | str, permission_code: str
    ) -> bool:
        """Check if an admin's role grants a permission.

        Args:
            admin_id: The admin's UUID
            permission_code: The permission code to check

        Returns:
            True if the admin exists and their role holds the permission
        """
        role_id = await self.get_admin_role_id(admin_id)
        if role_id is None:
            return False
        return await self.role_has_permission(role_id, permission_code)
