"""Permissions module: the catalogue of grantable permission codes."""

from fastapi import APIRouter


router = APIRouter(prefix="/permissions", tags=["permissions"])

# Import routes to register them (must be after router is defined)
from citizen_services.modules.permissions import routes  # noqa: F401, E402


# Module metadata
__module__ = {
    "name": "permissions",
    "version": "1.0.0",
    "description": "Permission catalogue management",
    "dependencies": [],
}
