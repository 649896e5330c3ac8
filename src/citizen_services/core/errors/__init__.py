"""Error handling module with the success/error response envelope."""

from citizen_services.core.errors.exceptions import (
    AppException,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    PermissionCheckError,
    UnauthorizedError,
)
from citizen_services.core.errors.handlers import (
    ErrorResponse,
    FieldError,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "BadRequestError",
    "ConflictError",
    # Handlers
    "ErrorResponse",
    "FieldError",
    "ForbiddenError",
    "InternalError",
    "NotFoundError",
    "PermissionCheckError",
    "UnauthorizedError",
    "register_exception_handlers",
]
