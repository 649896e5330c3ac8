"""Role API routes."""

from uuid import UUID

from fastapi import Depends, status

from citizen_services.api.dependencies import Resolver
from citizen_services.core.permissions import require_permission
from citizen_services.core.responses import ApiResponse
from citizen_services.modules.permissions.schemas import PermissionResponse
from citizen_services.modules.roles import router
from citizen_services.modules.roles.schemas import (
    RoleCreate,
    RolePermissionGrant,
    RoleResponse,
    RoleUpdate,
)
from citizen_services.modules.roles.services import RoleSvc


# ============================================================
# Role Management Routes
# ============================================================


@router.get(
    "",
    response_model=ApiResponse[list[RoleResponse]],
    response_model_exclude_none=True,
    summary="List roles",
    dependencies=[Depends(require_permission("roles.read"))],
)
async def list_roles(service: RoleSvc) -> ApiResponse[list[RoleResponse]]:
    """List all roles."""
    roles = await service.list_roles()
    return ApiResponse(
        data=[RoleResponse.model_validate(r) for r in roles],
        count=len(roles),
    )


@router.get(
    "/{role_id}",
    response_model=ApiResponse[RoleResponse],
    response_model_exclude_none=True,
    summary="Get role by ID",
    dependencies=[Depends(require_permission("roles.read"))],
)
async def get_role(role_id: UUID, service: RoleSvc) -> ApiResponse[RoleResponse]:
    """Get role by ID."""
    role = await service.get_role(role_id)
    return ApiResponse(data=RoleResponse.model_validate(role))


@router.post(
    "",
    response_model=ApiResponse[RoleResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create role",
    description="Create a role. The code is derived from the label when omitted.",
    dependencies=[Depends(require_permission("roles.create"))],
)
async def create_role(data: RoleCreate, service: RoleSvc) -> ApiResponse[RoleResponse]:
    """Create a role."""
    role = await service.create_role(data)
    return ApiResponse(data=RoleResponse.model_validate(role))


@router.put(
    "/{role_id}",
    response_model=ApiResponse[RoleResponse],
    response_model_exclude_none=True,
    summary="Update role",
    dependencies=[Depends(require_permission("roles.update"))],
)
async def update_role(
    role_id: UUID,
    data: RoleUpdate,
    service: RoleSvc,
) -> ApiResponse[RoleResponse]:
    """Update a role."""
    role = await service.update_role(role_id, data)
    return ApiResponse(data=RoleResponse.model_validate(role))


@router.delete(
    "/{role_id}",
    response_model=ApiResponse[RoleResponse],
    response_model_exclude_none=True,
    summary="Delete role",
    dependencies=[Depends(require_permission("roles.delete"))],
)
async def delete_role(role_id: UUID, service: RoleSvc) -> ApiResponse[RoleResponse]:
    """Delete a role."""
    role = await service.delete_role(role_id)
    return ApiResponse(
        data=RoleResponse.model_validate(role),
        message="Role deleted successfully",
    )


# ============================================================
# Role Permission Grants
# ============================================================


@router.get(
    "/{role_id}/permissions",
    response_model=ApiResponse[list[str]],
    response_model_exclude_none=True,
    summary="List role permission codes",
    dependencies=[Depends(require_permission("roles.read"))],
)
async def list_role_permissions(
    role_id: UUID,
    service: RoleSvc,
    resolver: Resolver,
) -> ApiResponse[list[str]]:
    """List the permission codes granted to a role."""
    role = await service.get_role(role_id)
    codes = await resolver.get_role_permissions(role.id)
    return ApiResponse(data=codes, count=len(codes))


@router.post(
    "/{role_id}/permissions",
    response_model=ApiResponse[PermissionResponse],
    response_model_exclude_none=True,
    summary="Grant permission to role",
    dependencies=[Depends(require_permission("roles.update"))],
)
async def grant_role_permission(
    role_id: UUID,
    data: RolePermissionGrant,
    service: RoleSvc,
) -> ApiResponse[PermissionResponse]:
    """Grant a permission to a role."""
    permission = await service.grant_permission(role_id, data.permission_id)
    return ApiResponse(
        data=PermissionResponse.model_validate(permission),
        message="Permission granted",
    )


@router.delete(
    "/{role_id}/permissions/{permission_id}",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
    summary="Revoke permission from role",
    dependencies=[Depends(require_permission("roles.update"))],
)
async def revoke_role_permission(
    role_id: UUID,
    permission_id: UUID,
    service: RoleSvc,
) -> ApiResponse[None]:
    """Revoke a permission from a role."""
    await service.revoke_permission(role_id, permission_id)
    return ApiResponse(message="Permission revoked")
