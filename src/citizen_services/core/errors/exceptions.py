"""Domain exceptions for the application.

These exceptions carry an explicit status classification and are converted
to the ``{"success": false, ...}`` response envelope by the exception
handlers. Controllers raise them instead of ad hoc error objects.
"""

from typing import Any

from citizen_services.core.constants import PERMISSION_CHECK_FAILED_MESSAGE


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message, sent as ``error``
        error_code: Machine-readable error code, used in logs
        status_code: HTTP status code for the response
        detail: Optional secondary explanation, sent as ``message``
        details: Additional keys merged into the response body
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        detail: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.detail = detail
        self.details = details or {}
        super().__init__(self.message)


class BadRequestError(AppException):
    """Raised for invalid input that passed schema validation.

    Example:
        raise BadRequestError("Invalid role")
    """

    message = "Bad request"
    error_code = "bad_request"
    status_code = 400


class UnauthorizedError(AppException):
    """Raised when no admin identity can be established for a request.

    Example:
        raise UnauthorizedError("Admin authentication required")
    """

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class ForbiddenError(AppException):
    """Raised when the admin lacks permission to perform an operation.

    Example:
        raise ForbiddenError(detail="Required permission: requests.delete")
    """

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Example:
        raise NotFoundError("Role not found", resource="role", resource_id=str(role_id))
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ConflictError(AppException):
    """Raised when there's a conflict with existing data.

    Example:
        raise ConflictError("Role with this code already exists")
    """

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 409


class InternalError(AppException):
    """Raised when an operation fails for reasons the client cannot fix."""

    message = "Internal server error"
    error_code = "internal_error"
    status_code = 500


class PermissionCheckError(InternalError):
    """Raised when the authorization gate fails before reaching a decision.

    The underlying failure text travels in ``detail``.
    """

    message = PERMISSION_CHECK_FAILED_MESSAGE
    error_code = "permission_check_failed"
