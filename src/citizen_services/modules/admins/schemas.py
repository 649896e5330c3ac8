"""Pydantic schemas for admin operations."""

import re
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from citizen_services.core.constants import (
    COUNTRY_CODE_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
)
from citizen_services.core.database import AdminStatus


_COUNTRY_CODE_RE = re.compile(r"^[A-Z]{3}$")


def validate_country_code(country: str) -> str:
    """Normalize and validate an ISO 3166-1 alpha-3 country code.

    Args:
        country: The country code, any case

    Returns:
        The upper-cased code

    Raises:
        ValueError: If the code is not three letters
    """
    country = country.strip().upper()
    if not _COUNTRY_CODE_RE.match(country):
        raise ValueError("Country must be an ISO 3166-1 alpha-3 code")
    return country


class AdminCreate(BaseModel):
    """Schema for onboarding a new admin."""

    email: EmailStr
    password: str = Field(
        ..., min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )
    firstname: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    lastname: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    country: str = Field(
        ..., min_length=COUNTRY_CODE_LENGTH, max_length=COUNTRY_CODE_LENGTH
    )
    role_id: UUID
    status: AdminStatus = AdminStatus.ENABLED

    @field_validator("country")
    @classmethod
    def country_code(cls, v: str) -> str:
        """Validate the country code."""
        return validate_country_code(v)


class AdminUpdate(BaseModel):
    """Schema for updating an admin. Only provided fields change."""

    email: EmailStr | None = None
    password: str | None = Field(
        None, min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )
    firstname: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    lastname: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    country: str | None = Field(
        None, min_length=COUNTRY_CODE_LENGTH, max_length=COUNTRY_CODE_LENGTH
    )
    role_id: UUID | None = None
    status: AdminStatus | None = None

    @field_validator("country")
    @classmethod
    def country_code(cls, v: str | None) -> str | None:
        """Validate the country code."""
        return validate_country_code(v) if v is not None else None


class AdminResponse(BaseModel):
    """Schema for admin response data. The password hash is never exposed."""

    id: UUID
    email: str
    firstname: str | None = None
    lastname: str | None = None
    country: str
    role_id: UUID
    status: AdminStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
