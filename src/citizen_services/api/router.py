"""Top-level router: operational endpoints at the root, resources under /api/v1."""

from fastapi import APIRouter

from citizen_services.api.health import health_router
from citizen_services.modules import discover_modules


API_PREFIX = "/api/v1"

api_router = APIRouter()
api_router.include_router(health_router)

v1_router = APIRouter(prefix=API_PREFIX)
for module_router in discover_modules():
    v1_router.include_router(module_router)
api_router.include_router(v1_router)
