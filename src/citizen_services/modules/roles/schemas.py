"""Pydantic schemas for role operations."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from citizen_services.core.constants import (
    MAX_CODE_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_LABEL_LENGTH,
)
from citizen_services.core.database import RecordStatus


class RoleCreate(BaseModel):
    """Schema for creating a role. The code is derived from the label if omitted."""

    label: str = Field(..., min_length=1, max_length=MAX_LABEL_LENGTH)
    code: str | None = Field(None, min_length=1, max_length=MAX_CODE_LENGTH)
    description: str | None = Field(None, max_length=MAX_DESCRIPTION_LENGTH)
    status: RecordStatus = RecordStatus.ACTIVE


class RoleUpdate(BaseModel):
    """Schema for updating a role."""

    label: str | None = Field(None, min_length=1, max_length=MAX_LABEL_LENGTH)
    code: str | None = Field(None, min_length=1, max_length=MAX_CODE_LENGTH)
    description: str | None = Field(None, max_length=MAX_DESCRIPTION_LENGTH)
    status: RecordStatus | None = None


class RoleResponse(BaseModel):
    """Schema for role response data."""

    id: UUID
    label: str
    code: str
    description: str | None = None
    status: RecordStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RolePermissionGrant(BaseModel):
    """Schema for granting a permission to a role."""

    permission_id: UUID
