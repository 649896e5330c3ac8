"""Permission repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, select

from citizen_services.api.dependencies import DBSession
from citizen_services.core.permissions.models import Permission, roles_permissions


class PermissionRepository:
    """Repository for Permission database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, permission: Permission) -> Permission:
        """Create a new permission.

        Args:
            permission: Permission instance to create

        Returns:
            The created permission with ID populated
        """
        self.session.add(permission)
        await self.session.flush()
        await self.session.refresh(permission)
        return permission

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        """Get a permission by ID."""
        return await self.session.get(Permission, permission_id)

    async def get_by_code(self, code: str) -> Permission | None:
        """Get a permission by its unique code."""
        result = await self.session.execute(
            select(Permission).where(Permission.code == code)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Permission]:
        """List all permissions grouped by entity, then action."""
        stmt = select(Permission).order_by(Permission.entity_code, Permission.action)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, permission: Permission) -> Permission:
        """Flush pending changes on a permission and reload it."""
        await self.session.flush()
        await self.session.refresh(permission)
        return permission

    async def delete(self, permission: Permission) -> None:
        """Delete a permission and revoke it from every role."""
        await self.session.execute(
            delete(roles_permissions).where(
                roles_permissions.c.permission_id == permission.id
            )
        )
        await self.session.delete(permission)
        await self.session.flush()


# Type alias for dependency injection
PermissionRepo = Annotated[PermissionRepository, Depends(PermissionRepository)]
