"""Permission gates for route protection.

A gate is a FastAPI dependency that only lets a request through when the
calling admin holds the required permission(s):

    @router.delete("/requests/{request_id}")
    async def delete_request(
        request_id: UUID,
        admin: Annotated[AdminIdentity, Depends(require_permission("requests.delete"))],
    ):
        ...

Outcomes:
- no admin identity          -> 401 UnauthorizedError
- permission check negative  -> 403 ForbiddenError
- gate failed to decide      -> 500 PermissionCheckError
- granted                    -> AdminIdentity, stored on request.state.admin_identity
                                (and on request.state.admin when nothing upstream set it)
"""

import asyncio
from collections.abc import Sequence
from enum import StrEnum
from typing import Annotated, Protocol

import structlog
from fastapi import Depends, Request

from citizen_services.core.constants import (
    ADMIN_AUTH_REQUIRED_MESSAGE,
    DEFAULT_ADMIN_ID_HEADER,
    PERMISSION_DENIED_MESSAGE,
)
from citizen_services.core.errors import (
    AppException,
    ForbiddenError,
    PermissionCheckError,
    UnauthorizedError,
)
from citizen_services.core.permissions.resolver import PermissionResolver
from citizen_services.core.permissions.schemas import AdminIdentity


logger = structlog.get_logger()


class PermissionMode(StrEnum):
    """How a gate aggregates the outcome of several permission checks."""

    SINGLE = "single"
    ANY = "any"
    ALL = "all"


class AdminIdExtractor(Protocol):
    """Strategy for finding the calling admin's identifier on a request."""

    def extract(self, request: Request) -> str | None: ...


class DefaultAdminIdExtractor:
    """Prefer an identity attached by an earlier step, else read a header.

    Neither source is verified here; authentication happens upstream.
    """

    def __init__(self, header_name: str = DEFAULT_ADMIN_ID_HEADER) -> None:
        self.header_name = header_name

    def extract(self, request: Request) -> str | None:
        admin = getattr(request.state, "admin", None)
        if admin is not None and getattr(admin, "admin_id", None):
            return str(admin.admin_id)
        return request.headers.get(self.header_name) or None


def get_permission_resolver(request: Request) -> PermissionResolver:
    """Return the resolver owned by the running application."""
    resolver = getattr(request.app.state, "permission_resolver", None)
    if resolver is None:
        raise RuntimeError("Permission resolver is not configured")
    return resolver


def _default_extractor(request: Request) -> AdminIdExtractor:
    extractor = getattr(request.app.state, "admin_id_extractor", None)
    return extractor or DefaultAdminIdExtractor()


class PermissionGate:
    """FastAPI dependency that enforces one or more permission codes.

    Attributes:
        codes: Permission codes to check
        mode: Aggregation rule (single, any, all)
        extractor: Identity strategy; falls back to the app's configured
            extractor, then to DefaultAdminIdExtractor
        unauthenticated_message: Error text for 401 responses
        forbidden_message: Error text for 403 responses
    """

    def __init__(
        self,
        codes: Sequence[str],
        mode: PermissionMode = PermissionMode.SINGLE,
        *,
        extractor: AdminIdExtractor | None = None,
        unauthenticated_message: str = ADMIN_AUTH_REQUIRED_MESSAGE,
        forbidden_message: str = PERMISSION_DENIED_MESSAGE,
    ) -> None:
        if not codes:
            raise ValueError("A permission gate needs at least one permission code")
        if mode is PermissionMode.SINGLE and len(codes) != 1:
            raise ValueError("A single-permission gate takes exactly one code")

        self.codes = list(codes)
        self.mode = mode
        self.extractor = extractor
        self.unauthenticated_message = unauthenticated_message
        self.forbidden_message = forbidden_message

    def requirement(self) -> str:
        """Describe what the gate requires, for 403 responses."""
        if self.mode is PermissionMode.ANY:
            return f"Required one of: {', '.join(self.codes)}"
        if self.mode is PermissionMode.ALL:
            return f"Required all of: {', '.join(self.codes)}"
        return f"Required permission: {self.codes[0]}"

    async def __call__(self, request: Request) -> AdminIdentity:
        try:
            extractor = self.extractor or _default_extractor(request)
            admin_id = extractor.extract(request)

            if not admin_id:
                logger.warning("admin_unauthenticated", path=request.url.path)
                raise UnauthorizedError(
                    self.unauthenticated_message,
                    error_code="admin_auth_required",
                )

            resolver = get_permission_resolver(request)
            if not await self.evaluate(resolver, admin_id):
                logger.warning(
                    "permission_denied",
                    admin_id=admin_id,
                    permissions=self.codes,
                    mode=str(self.mode),
                    path=request.url.path,
                )
                raise ForbiddenError(
                    self.forbidden_message,
                    error_code="permission_denied",
                    detail=self.requirement(),
                )

            return await self._attach_identity(request, resolver, admin_id)
        except AppException:
            raise
        except Exception as exc:
            logger.exception(
                "permission_check_failed",
                permissions=self.codes,
                path=request.url.path,
            )
            raise PermissionCheckError(detail=str(exc) or type(exc).__name__) from exc

    async def evaluate(self, resolver: PermissionResolver, admin_id: str) -> bool:
        """Check every code independently and aggregate per the gate's mode."""
        results = await asyncio.gather(
            *(resolver.admin_has_permission(admin_id, code) for code in self.codes)
        )
        if self.mode is PermissionMode.ANY:
            return any(results)
        return all(results)

    async def _attach_identity(
        self,
        request: Request,
        resolver: PermissionResolver,
        admin_id: str,
    ) -> AdminIdentity:
        upstream = getattr(request.state, "admin", None)
        if (
            isinstance(upstream, AdminIdentity)
            and upstream.role_id is not None
            and str(upstream.admin_id) == admin_id
        ):
            identity = upstream
        else:
            # role_id is None if the role vanished after the check; still granted
            role_id = await resolver.get_admin_role_id(admin_id)
            identity = AdminIdentity(admin_id=admin_id, role_id=role_id)

        # Upstream login objects on request.state.admin are left untouched
        request.state.admin_identity = identity
        if upstream is None:
            request.state.admin = identity
        structlog.contextvars.bind_contextvars(admin_id=str(identity.admin_id))
        return identity


def require_permission(
    code: str,
    *,
    extractor: AdminIdExtractor | None = None,
    unauthenticated_message: str = ADMIN_AUTH_REQUIRED_MESSAGE,
    forbidden_message: str = PERMISSION_DENIED_MESSAGE,
) -> PermissionGate:
    """Gate that requires a specific permission.

    Usage:
        @router.post("/statuses", dependencies=[Depends(require_permission("statuses.create"))])
        async def create_status(...):
            ...

    Args:
        code: The permission code (e.g. "requests.approve")
        extractor: Optional identity extraction strategy
        unauthenticated_message: Error text when no admin is identified
        forbidden_message: Error text when the permission is missing

    Returns:
        The gate dependency
    """
    return PermissionGate(
        [code],
        PermissionMode.SINGLE,
        extractor=extractor,
        unauthenticated_message=unauthenticated_message,
        forbidden_message=forbidden_message,
    )


def require_any_permission(
    codes: Sequence[str],
    *,
    extractor: AdminIdExtractor | None = None,
    unauthenticated_message: str = ADMIN_AUTH_REQUIRED_MESSAGE,
    forbidden_message: str = PERMISSION_DENIED_MESSAGE,
) -> PermissionGate:
    """Gate that requires any one of the specified permissions.

    Usage:
        @router.post(
            "/requests",
            dependencies=[Depends(require_any_permission(["requests.create", "requests.approve"]))],
        )
    """
    return PermissionGate(
        codes,
        PermissionMode.ANY,
        extractor=extractor,
        unauthenticated_message=unauthenticated_message,
        forbidden_message=forbidden_message,
    )


def require_all_permissions(
    codes: Sequence[str],
    *,
    extractor: AdminIdExtractor | None = None,
    unauthenticated_message: str = ADMIN_AUTH_REQUIRED_MESSAGE,
    forbidden_message: str = PERMISSION_DENIED_MESSAGE,
) -> PermissionGate:
    """Gate that requires all of the specified permissions.

    Usage:
        @router.delete(
            "/requests/{request_id}",
            dependencies=[Depends(require_all_permissions(["requests.delete", "requests.read"]))],
        )
    """
    return PermissionGate(
        codes,
        PermissionMode.ALL,
        extractor=extractor,
        unauthenticated_message=unauthenticated_message,
        forbidden_message=forbidden_message,
    )


async def get_current_admin(request: Request) -> AdminIdentity:
    """Get the identity a permission gate attached to this request.

    Declare the gate before this dependency (route-level ``dependencies``
    run first). Whatever an upstream step put on ``request.state.admin``
    is not consulted; only a gate's grant counts.

    Raises:
        UnauthorizedError: If no gate has granted this request
    """
    admin = getattr(request.state, "admin_identity", None)
    if not isinstance(admin, AdminIdentity):
        raise UnauthorizedError(
            ADMIN_AUTH_REQUIRED_MESSAGE,
            error_code="admin_auth_required",
        )
    return admin


CurrentAdmin = Annotated[AdminIdentity, Depends(get_current_admin)]
