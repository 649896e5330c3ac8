"""Operational endpoints: liveness, readiness and service info.

Readiness means the gate can decide: the app has a permission resolver and a
session factory, and the permission tables answer a query.
"""

from typing import Any

import structlog
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import select

from citizen_services.config import Settings
from citizen_services.core.permissions import Permission


logger = structlog.get_logger()

OK = "ok"
NOT_CONFIGURED = "not configured"

health_router = APIRouter(tags=["health"])


class Liveness(BaseModel):
    status: str


class Readiness(BaseModel):
    status: str
    checks: dict[str, str]


def _wiring_checks(request: Request) -> dict[str, str]:
    state = request.app.state
    return {
        "permission_resolver": OK
        if getattr(state, "permission_resolver", None) is not None
        else NOT_CONFIGURED,
        "session_factory": OK
        if getattr(state, "session_factory", None) is not None
        else NOT_CONFIGURED,
    }


async def _check_permission_store(request: Request) -> str:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        return NOT_CONFIGURED
    try:
        async with session_factory() as session:
            await session.execute(select(Permission.id).limit(1))
    except Exception as exc:
        logger.warning("permission_store_unreachable", error=str(exc))
        return str(exc) or type(exc).__name__
    return OK


@health_router.get("/health/live", response_model=Liveness, summary="Liveness check")
async def liveness() -> Liveness:
    """The process is up; nothing else is checked."""
    return Liveness(status="alive")


@health_router.get(
    "/health/ready",
    response_model=Readiness,
    summary="Readiness check",
    responses={503: {"model": Readiness}},
)
async def readiness(request: Request) -> JSONResponse:
    """Report whether permission checks can be answered.

    Returns 503 with ``degraded`` when any check is not ``ok``.
    """
    checks = _wiring_checks(request)
    checks["permission_store"] = await _check_permission_store(request)

    ready = all(result == OK for result in checks.values())
    body = Readiness(status="ready" if ready else "degraded", checks=checks)
    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(),
    )


@health_router.get("/info", summary="Service info")
async def info(request: Request) -> dict[str, Any]:
    settings: Settings = request.app.state.settings
    return {
        "app": settings.app_name,
        "environment": settings.environment,
        "debug": settings.debug,
        "admin_id_header": settings.admin_id_header,
    }
