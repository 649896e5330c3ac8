"""Admin service for business logic."""

from typing import Annotated, Any
from uuid import UUID

import structlog
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from citizen_services.core.auth import hash_password
from citizen_services.core.database.errors import translate_integrity_error
from citizen_services.core.errors import BadRequestError, ConflictError, NotFoundError
from citizen_services.core.permissions.models import Admin
from citizen_services.modules.admins.repos import AdminRepo
from citizen_services.modules.admins.schemas import AdminCreate, AdminUpdate
from citizen_services.modules.roles.repos import RoleRepo


logger = structlog.get_logger()

ADMIN_EMAIL_CONFLICT = "Admin with this email already exists"
INVALID_ROLE = "Invalid role"

_REQUIRED_FIELDS = ("email", "password", "country", "role_id", "status")


class AdminService:
    """Service for admin onboarding and management.

    Emails are stored lower-cased and passwords only ever as bcrypt hashes.
    """

    def __init__(self, repo: AdminRepo, role_repo: RoleRepo) -> None:
        self.repo = repo
        self.role_repo = role_repo

    async def list_admins(self) -> list[Admin]:
        """List all admins, newest first."""
        return await self.repo.list_all()

    async def get_admin(self, admin_id: UUID) -> Admin:
        """Get an admin by ID.

        Raises:
            NotFoundError: If admin not found
        """
        admin = await self.repo.get_by_id(admin_id)
        if not admin:
            raise NotFoundError(
                "Admin not found",
                resource="admin",
                resource_id=str(admin_id),
            )
        return admin

    async def onboard_admin(self, data: AdminCreate) -> Admin:
        """Create a new admin account.

        Args:
            data: Admin onboarding data

        Returns:
            The created admin

        Raises:
            BadRequestError: If the role does not exist
            ConflictError: If the email is already registered
        """
        email = data.email.lower()
        await self._ensure_email_available(email)
        await self._ensure_role_exists(data.role_id)

        admin = Admin(
            email=email,
            password_hash=hash_password(data.password),
            firstname=data.firstname,
            lastname=data.lastname,
            country=data.country,
            role_id=data.role_id,
            status=data.status,
        )
        try:
            admin = await self.repo.create(admin)
        except IntegrityError as exc:
            raise translate_integrity_error(
                exc,
                conflict_message=ADMIN_EMAIL_CONFLICT,
                invalid_reference_message=INVALID_ROLE,
            ) from exc

        logger.info("admin_onboarded", admin_id=str(admin.id), role_id=str(admin.role_id))
        return admin

    async def update_admin(self, admin_id: UUID, data: AdminUpdate) -> Admin:
        """Update an admin.

        Raises:
            BadRequestError: If no fields were provided or the role is invalid
            NotFoundError: If admin not found
            ConflictError: If the new email is already registered
        """
        changes: dict[str, Any] = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field not in _REQUIRED_FIELDS
        }
        if not changes:
            raise BadRequestError("No fields to update")

        admin = await self.get_admin(admin_id)

        if "email" in changes:
            changes["email"] = changes["email"].lower()
            if changes["email"] != admin.email:
                await self._ensure_email_available(changes["email"])
        if "role_id" in changes and changes["role_id"] != admin.role_id:
            await self._ensure_role_exists(changes["role_id"])
        if "password" in changes:
            changes["password_hash"] = hash_password(changes.pop("password"))

        for field, value in changes.items():
            setattr(admin, field, value)

        try:
            return await self.repo.update(admin)
        except IntegrityError as exc:
            raise translate_integrity_error(
                exc,
                conflict_message=ADMIN_EMAIL_CONFLICT,
                invalid_reference_message=INVALID_ROLE,
            ) from exc

    async def delete_admin(self, admin_id: UUID) -> Admin:
        """Permanently delete an admin.

        Raises:
            NotFoundError: If admin not found
        """
        admin = await self.get_admin(admin_id)
        await self.repo.delete(admin)
        logger.info("admin_deleted", admin_id=str(admin_id))
        return admin

    async def _ensure_email_available(self, email: str) -> None:
        if await self.repo.get_by_email(email):
            raise ConflictError(
                ADMIN_EMAIL_CONFLICT,
                error_code="email_exists",
                details={"email": email},
            )

    async def _ensure_role_exists(self, role_id: UUID) -> None:
        if not await self.role_repo.get_by_id(role_id):
            raise BadRequestError(
                INVALID_ROLE,
                error_code="invalid_role",
                details={"role_id": str(role_id)},
            )


# Type alias for dependency injection
AdminSvc = Annotated[AdminService, Depends(AdminService)]
