"""Pydantic schemas for permission operations."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from citizen_services.core.constants import (
    MAX_ACTION_LENGTH,
    MAX_CODE_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_ENTITY_CODE_LENGTH,
    MAX_LABEL_LENGTH,
)
from citizen_services.core.database import RecordStatus


class PermissionCreate(BaseModel):
    """Schema for creating a permission.

    The code is derived as ``<entity>.<action>`` when omitted, where
    ``<entity>`` is the last dotted segment of ``entity_code``.
    """

    label: str = Field(..., min_length=1, max_length=MAX_LABEL_LENGTH)
    entity_code: str = Field(..., min_length=1, max_length=MAX_ENTITY_CODE_LENGTH)
    action: str = Field(..., min_length=1, max_length=MAX_ACTION_LENGTH)
    code: str | None = Field(None, min_length=1, max_length=MAX_CODE_LENGTH)
    description: str | None = Field(None, max_length=MAX_DESCRIPTION_LENGTH)
    status: RecordStatus = RecordStatus.ACTIVE

    @field_validator("entity_code", "action", "code")
    @classmethod
    def lowercase_codes(cls, v: str | None) -> str | None:
        return v.strip().lower() if v is not None else None


class PermissionUpdate(BaseModel):
    """Schema for updating a permission."""

    label: str | None = Field(None, min_length=1, max_length=MAX_LABEL_LENGTH)
    entity_code: str | None = Field(
        None, min_length=1, max_length=MAX_ENTITY_CODE_LENGTH
    )
    action: str | None = Field(None, min_length=1, max_length=MAX_ACTION_LENGTH)
    code: str | None = Field(None, min_length=1, max_length=MAX_CODE_LENGTH)
    description: str | None = Field(None, max_length=MAX_DESCRIPTION_LENGTH)
    status: RecordStatus | None = None

    @field_validator("entity_code", "action", "code")
    @classmethod
    def lowercase_codes(cls, v: str | None) -> str | None:
        return v.strip().lower() if v is not None else None


class PermissionResponse(BaseModel):
    """Schema for permission response data."""

    id: UUID
    label: str
    code: str
    entity_code: str
    action: str
    description: str | None = None
    status: RecordStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
