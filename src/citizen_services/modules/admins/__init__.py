"""Admins module: operator accounts and their role assignment."""

from fastapi import APIRouter


router = APIRouter(prefix="/admins", tags=["admins"])

# Import routes to register them (must be after router is defined)
from citizen_services.modules.admins import routes  # noqa: F401, E402


# Module metadata
__module__ = {
    "name": "admins",
    "version": "1.0.0",
    "description": "Admin onboarding and management",
    "dependencies": ["roles"],
}
