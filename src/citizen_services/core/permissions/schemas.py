"""Schemas shared by the permission gate and its consumers."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AdminIdentity(BaseModel):
    """Identity of the admin a gate let through.

    Stored on ``request.state.admin_identity`` so downstream handlers can
    reuse it without resolving the role again.
    """

    admin_id: UUID
    role_id: UUID | None = None

    model_config = ConfigDict(frozen=True)
