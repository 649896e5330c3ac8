"""Role repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, func, insert, select

from citizen_services.api.dependencies import DBSession
from citizen_services.core.permissions.models import (
    Admin,
    Role,
    roles_permissions,
)


class RoleRepository:
    """Repository for Role and role-permission grant operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, role: Role) -> Role:
        """Create a new role.

        Args:
            role: Role instance to create

        Returns:
            The created role with ID populated
        """
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get a role by ID.

        Args:
            role_id: The role's UUID

        Returns:
            Role if found, None otherwise
        """
        return await self.session.get(Role, role_id)

    async def get_by_code(self, code: str) -> Role | None:
        """Get a role by its unique code."""
        result = await self.session.execute(select(Role).where(Role.code == code))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Role]:
        """List all roles ordered by label."""
        result = await self.session.execute(select(Role).order_by(Role.label))
        return list(result.scalars().all())

    async def update(self, role: Role) -> Role:
        """Flush pending changes on a role and reload it."""
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def delete(self, role: Role) -> None:
        """Delete a role together with its grants."""
        await self.session.execute(
            delete(roles_permissions).where(roles_permissions.c.role_id == role.id)
        )
        await self.session.delete(role)
        await self.session.flush()

    async def count_admins(self, role_id: UUID) -> int:
        """Count admins currently holding a role."""
        stmt = select(func.count()).select_from(Admin).where(Admin.role_id == role_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def has_grant(self, role_id: UUID, permission_id: UUID) -> bool:
        """Check whether a grant row exists."""
        stmt = (
            select(func.count())
            .select_from(roles_permissions)
            .where(
                roles_permissions.c.role_id == role_id,
                roles_permissions.c.permission_id == permission_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0

    async def add_grant(self, role_id: UUID, permission_id: UUID) -> None:
        """Insert a grant row."""
        await self.session.execute(
            insert(roles_permissions).values(role_id=role_id, permission_id=permission_id)
        )
        await self.session.flush()

    async def remove_grant(self, role_id: UUID, permission_id: UUID) -> int:
        """Delete a grant row.

        Returns:
            Number of rows removed
        """
        result = await self.session.execute(
            delete(roles_permissions).where(
                roles_permissions.c.role_id == role_id,
                roles_permissions.c.permission_id == permission_id,
            )
        )
        await self.session.flush()
        return result.rowcount


# Type alias for dependency injection
RoleRepo = Annotated[RoleRepository, Depends(RoleRepository)]
