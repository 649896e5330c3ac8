"""Permission service for business logic."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from citizen_services.core.database.errors import translate_integrity_error
from citizen_services.core.errors import BadRequestError, ConflictError, NotFoundError
from citizen_services.core.permissions.models import Permission
from citizen_services.core.utils.text import generate_permission_code
from citizen_services.modules.permissions.repos import PermissionRepo
from citizen_services.modules.permissions.schemas import (
    PermissionCreate,
    PermissionUpdate,
)


PERMISSION_CODE_CONFLICT = "Permission with this code already exists"

_REQUIRED_FIELDS = ("label", "code", "entity_code", "action", "status")


class PermissionService:
    """Service for managing the permission catalogue."""

    def __init__(self, repo: PermissionRepo) -> None:
        self.repo = repo

    async def list_permissions(self) -> list[Permission]:
        """List all permissions."""
        return await self.repo.list_all()

    async def get_permission(self, permission_id: UUID) -> Permission:
        """Get a permission by ID.

        Raises:
            NotFoundError: If permission not found
        """
        permission = await self.repo.get_by_id(permission_id)
        if not permission:
            raise NotFoundError(
                "Permission not found",
                resource="permission",
                resource_id=str(permission_id),
            )
        return permission

    async def create_permission(self, data: PermissionCreate) -> Permission:
        """Create a new permission.

        Args:
            data: Permission creation data

        Returns:
            The created permission

        Raises:
            ConflictError: If the (possibly derived) code is taken
        """
        code = data.code or generate_permission_code(data.entity_code, data.action)
        await self._ensure_code_available(code)

        permission = Permission(
            label=data.label,
            code=code,
            entity_code=data.entity_code,
            action=data.action,
            description=data.description,
            status=data.status,
        )
        try:
            return await self.repo.create(permission)
        except IntegrityError as exc:
            raise translate_integrity_error(
                exc, conflict_message=PERMISSION_CODE_CONFLICT
            ) from exc

    async def update_permission(
        self, permission_id: UUID, data: PermissionUpdate
    ) -> Permission:
        """Update a permission.

        Changing both entity and action without an explicit code
        regenerates the code.

        Raises:
            BadRequestError: If no fields were provided
            NotFoundError: If permission not found
            ConflictError: If the new code is taken
        """
        changes: dict[str, Any] = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field not in _REQUIRED_FIELDS
        }
        if not changes:
            raise BadRequestError("No fields to update")

        permission = await self.get_permission(permission_id)

        if "entity_code" in changes and "action" in changes and "code" not in changes:
            changes["code"] = generate_permission_code(
                changes["entity_code"], changes["action"]
            )
        if "code" in changes and changes["code"] != permission.code:
            await self._ensure_code_available(changes["code"])

        for field, value in changes.items():
            setattr(permission, field, value)

        try:
            return await self.repo.update(permission)
        except IntegrityError as exc:
            raise translate_integrity_error(
                exc, conflict_message=PERMISSION_CODE_CONFLICT
            ) from exc

    async def delete_permission(self, permission_id: UUID) -> Permission:
        """Delete a permission, revoking it from every role.

        Raises:
            NotFoundError: If permission not found
        """
        permission = await self.get_permission(permission_id)
        await self.repo.delete(permission)
        return permission

    async def _ensure_code_available(self, code: str) -> None:
        if await self.repo.get_by_code(code):
            raise ConflictError(
                PERMISSION_CODE_CONFLICT,
                error_code="permission_code_exists",
                details={"code": code},
            )


# Type alias for dependency injection
PermissionSvc = Annotated[PermissionService, Depends(PermissionService)]
