"""Admin repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import select

from citizen_services.api.dependencies import DBSession
from citizen_services.core.permissions.models import Admin


class AdminRepository:
    """Repository for Admin database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, admin: Admin) -> Admin:
        """Create a new admin.

        Args:
            admin: Admin instance to create

        Returns:
            The created admin with ID populated
        """
        self.session.add(admin)
        await self.session.flush()
        await self.session.refresh(admin)
        return admin

    async def get_by_id(self, admin_id: UUID) -> Admin | None:
        """Get an admin by ID."""
        return await self.session.get(Admin, admin_id)

    async def get_by_email(self, email: str) -> Admin | None:
        """Get an admin by email address.

        Args:
            email: The email address, already lower-cased

        Returns:
            Admin if found, None otherwise
        """
        result = await self.session.execute(select(Admin).where(Admin.email == email))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Admin]:
        """List all admins, newest first."""
        stmt = select(Admin).order_by(Admin.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, admin: Admin) -> Admin:
        """Flush pending changes on an admin and reload it."""
        await self.session.flush()
        await self.session.refresh(admin)
        return admin

    async def delete(self, admin: Admin) -> None:
        """Delete an admin."""
        await self.session.delete(admin)
        await self.session.flush()


# Type alias for dependency injection
AdminRepo = Annotated[AdminRepository, Depends(AdminRepository)]
