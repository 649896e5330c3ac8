"""Role service for business logic."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from citizen_services.core.database.errors import translate_integrity_error
from citizen_services.core.errors import BadRequestError, ConflictError, NotFoundError
from citizen_services.core.permissions.models import Permission, Role
from citizen_services.core.utils.text import generate_role_code
from citizen_services.modules.permissions.repos import PermissionRepo
from citizen_services.modules.roles.repos import RoleRepo
from citizen_services.modules.roles.schemas import RoleCreate, RoleUpdate


ROLE_CODE_CONFLICT = "Role with this code already exists"

# Columns that may not be cleared with an explicit null
_REQUIRED_FIELDS = ("label", "code", "status")


class RoleService:
    """Service for role management and role-permission grants."""

    def __init__(self, repo: RoleRepo, permission_repo: PermissionRepo) -> None:
        self.repo = repo
        self.permission_repo = permission_repo

    async def list_roles(self) -> list[Role]:
        """List all roles."""
        return await self.repo.list_all()

    async def get_role(self, role_id: UUID) -> Role:
        """Get a role by ID.

        Raises:
            NotFoundError: If role not found
        """
        role = await self.repo.get_by_id(role_id)
        if not role:
            raise NotFoundError(
                "Role not found",
                resource="role",
                resource_id=str(role_id),
            )
        return role

    async def create_role(self, data: RoleCreate) -> Role:
        """Create a new role.

        Args:
            data: Role creation data

        Returns:
            The created role

        Raises:
            ConflictError: If the (possibly derived) code is taken
        """
        code = data.code or generate_role_code(data.label)
        await self._ensure_code_available(code)

        role = Role(
            label=data.label,
            code=code,
            description=data.description,
            status=data.status,
        )
        try:
            return await self.repo.create(role)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, conflict_message=ROLE_CODE_CONFLICT) from exc

    async def update_role(self, role_id: UUID, data: RoleUpdate) -> Role:
        """Update a role.

        A new label regenerates the code unless a code is given explicitly.

        Raises:
            BadRequestError: If no fields were provided
            NotFoundError: If role not found
            ConflictError: If the new code is taken
        """
        changes: dict[str, Any] = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field not in _REQUIRED_FIELDS
        }
        if not changes:
            raise BadRequestError("No fields to update")

        role = await self.get_role(role_id)

        if "label" in changes and "code" not in changes:
            changes["code"] = generate_role_code(changes["label"])
        if "code" in changes and changes["code"] != role.code:
            await self._ensure_code_available(changes["code"])

        for field, value in changes.items():
            setattr(role, field, value)

        try:
            return await self.repo.update(role)
        except IntegrityError as exc:
            raise translate_integrity_error(exc, conflict_message=ROLE_CODE_CONFLICT) from exc

    async def delete_role(self, role_id: UUID) -> Role:
        """Delete a role and its grants.

        Raises:
            NotFoundError: If role not found
            ConflictError: If admins still hold the role
        """
        role = await self.get_role(role_id)

        admin_count = await self.repo.count_admins(role.id)
        if admin_count:
            raise ConflictError(
                "Role is assigned to one or more admins",
                error_code="role_in_use",
                details={"admin_count": admin_count},
            )

        await self.repo.delete(role)
        return role

    async def grant_permission(self, role_id: UUID, permission_id: UUID) -> Permission:
        """Grant a permission to a role. Granting twice is a no-op.

        Raises:
            NotFoundError: If the role or the permission does not exist
        """
        role = await self.get_role(role_id)
        permission = await self.permission_repo.get_by_id(permission_id)
        if not permission:
            raise NotFoundError(
                "Permission not found",
                resource="permission",
                resource_id=str(permission_id),
            )

        if not await self.repo.has_grant(role.id, permission.id):
            await self.repo.add_grant(role.id, permission.id)
        return permission

    async def revoke_permission(self, role_id: UUID, permission_id: UUID) -> None:
        """Revoke a permission from a role.

        Raises:
            NotFoundError: If the role does not exist or does not hold the permission
        """
        role = await self.get_role(role_id)
        removed = await self.repo.remove_grant(role.id, permission_id)
        if not removed:
            raise NotFoundError(
                "Permission is not granted to this role",
                resource="permission",
                resource_id=str(permission_id),
            )

    async def _ensure_code_available(self, code: str) -> None:
        if await self.repo.get_by_code(code):
            raise ConflictError(
                ROLE_CODE_CONFLICT,
                error_code="role_code_exists",
                details={"code": code},
            )


# Type alias for dependency injection
RoleSvc = Annotated[RoleService, Depends(RoleService)]
