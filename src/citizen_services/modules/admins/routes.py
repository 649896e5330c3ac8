"""Admin API routes."""

from uuid import UUID

from fastapi import Depends, status

from citizen_services.core.permissions import require_permission
from citizen_services.core.responses import ApiResponse
from citizen_services.modules.admins import router
from citizen_services.modules.admins.schemas import (
    AdminCreate,
    AdminResponse,
    AdminUpdate,
)
from citizen_services.modules.admins.services import AdminSvc


@router.get(
    "",
    response_model=ApiResponse[list[AdminResponse]],
    response_model_exclude_none=True,
    summary="List admins",
    dependencies=[Depends(require_permission("admins.read"))],
)
async def list_admins(service: AdminSvc) -> ApiResponse[list[AdminResponse]]:
    """List all admins, newest first."""
    admins = await service.list_admins()
    return ApiResponse(
        data=[AdminResponse.model_validate(a) for a in admins],
        count=len(admins),
    )


@router.get(
    "/{admin_id}",
    response_model=ApiResponse[AdminResponse],
    response_model_exclude_none=True,
    summary="Get admin by ID",
    dependencies=[Depends(require_permission("admins.read"))],
)
async def get_admin(admin_id: UUID, service: AdminSvc) -> ApiResponse[AdminResponse]:
    """Get admin by ID."""
    admin = await service.get_admin(admin_id)
    return ApiResponse(data=AdminResponse.model_validate(admin))


@router.post(
    "",
    response_model=ApiResponse[AdminResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Onboard admin",
    description="Create an admin account bound to an existing role.",
    dependencies=[Depends(require_permission("admins.create"))],
)
async def onboard_admin(
    data: AdminCreate, service: AdminSvc
) -> ApiResponse[AdminResponse]:
    """Onboard a new admin."""
    admin = await service.onboard_admin(data)
    return ApiResponse(
        data=AdminResponse.model_validate(admin),
        message="Admin onboarded successfully",
    )


@router.put(
    "/{admin_id}",
    response_model=ApiResponse[AdminResponse],
    response_model_exclude_none=True,
    summary="Update admin",
    dependencies=[Depends(require_permission("admins.update"))],
)
async def update_admin(
    admin_id: UUID,
    data: AdminUpdate,
    service: AdminSvc,
) -> ApiResponse[AdminResponse]:
    """Update an admin."""
    admin = await service.update_admin(admin_id, data)
    return ApiResponse(data=AdminResponse.model_validate(admin))


@router.delete(
    "/{admin_id}",
    response_model=ApiResponse[AdminResponse],
    response_model_exclude_none=True,
    summary="Delete admin",
    dependencies=[Depends(require_permission("admins.delete"))],
)
async def delete_admin(admin_id: UUID, service: AdminSvc) -> ApiResponse[AdminResponse]:
    """Delete an admin."""
    admin = await service.delete_admin(admin_id)
    return ApiResponse(
        data=AdminResponse.model_validate(admin),
        message="Admin deleted successfully",
    )
