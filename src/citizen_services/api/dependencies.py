"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from citizen_services.core.database import get_db
from citizen_services.core.permissions import PermissionResolver, get_permission_resolver


# Type alias for database session dependency
DBSession = Annotated[AsyncSession, Depends(get_db)]

# Type alias for the app-owned permission resolver
Resolver = Annotated[PermissionResolver, Depends(get_permission_resolver)]
