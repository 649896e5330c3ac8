"""Permission API routes."""

from uuid import UUID

from fastapi import Depends, status

from citizen_services.core.permissions import require_permission
from citizen_services.core.responses import ApiResponse
from citizen_services.modules.permissions import router
from citizen_services.modules.permissions.schemas import (
    PermissionCreate,
    PermissionResponse,
    PermissionUpdate,
)
from citizen_services.modules.permissions.services import PermissionSvc


@router.get(
    "",
    response_model=ApiResponse[list[PermissionResponse]],
    response_model_exclude_none=True,
    summary="List permissions",
    dependencies=[Depends(require_permission("permissions.read"))],
)
async def list_permissions(
    service: PermissionSvc,
) -> ApiResponse[list[PermissionResponse]]:
    """List all permissions ordered by entity and action."""
    permissions = await service.list_permissions()
    return ApiResponse(
        data=[PermissionResponse.model_validate(p) for p in permissions],
        count=len(permissions),
    )


@router.get(
    "/{permission_id}",
    response_model=ApiResponse[PermissionResponse],
    response_model_exclude_none=True,
    summary="Get permission by ID",
    dependencies=[Depends(require_permission("permissions.read"))],
)
async def get_permission(
    permission_id: UUID, service: PermissionSvc
) -> ApiResponse[PermissionResponse]:
    """Get permission by ID."""
    permission = await service.get_permission(permission_id)
    return ApiResponse(data=PermissionResponse.model_validate(permission))


@router.post(
    "",
    response_model=ApiResponse[PermissionResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create permission",
    dependencies=[Depends(require_permission("permissions.create"))],
)
async def create_permission(
    data: PermissionCreate, service: PermissionSvc
) -> ApiResponse[PermissionResponse]:
    """Create a permission."""
    permission = await service.create_permission(data)
    return ApiResponse(data=PermissionResponse.model_validate(permission))


@router.put(
    "/{permission_id}",
    response_model=ApiResponse[PermissionResponse],
    response_model_exclude_none=True,
    summary="Update permission",
    dependencies=[Depends(require_permission("permissions.update"))],
)
async def update_permission(
    permission_id: UUID,
    data: PermissionUpdate,
    service: PermissionSvc,
) -> ApiResponse[PermissionResponse]:
    """Update a permission."""
    permission = await service.update_permission(permission_id, data)
    return ApiResponse(data=PermissionResponse.model_validate(permission))


@router.delete(
    "/{permission_id}",
    response_model=ApiResponse[PermissionResponse],
    response_model_exclude_none=True,
    summary="Delete permission",
    dependencies=[Depends(require_permission("permissions.delete"))],
)
async def delete_permission(
    permission_id: UUID, service: PermissionSvc
) -> ApiResponse[PermissionResponse]:
    """Delete a permission."""
    permission = await service.delete_permission(permission_id)
    return ApiResponse(
        data=PermissionResponse.model_validate(permission),
        message="Permission deleted successfully",
    )
