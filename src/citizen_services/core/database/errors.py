"""Translation of database constraint violations into domain errors."""

from sqlalchemy.exc import IntegrityError

from citizen_services.core.errors import (
    AppException,
    BadRequestError,
    ConflictError,
    InternalError,
)


# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
CHECK_VIOLATION = "23514"


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def is_unique_violation(exc: IntegrityError) -> bool:
    """Check whether an IntegrityError was caused by a unique constraint."""
    return _sqlstate(exc) == UNIQUE_VIOLATION or "UNIQUE constraint failed" in str(
        exc.orig
    )


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """Check whether an IntegrityError was caused by a foreign key."""
    return _sqlstate(exc) == FOREIGN_KEY_VIOLATION or (
        "FOREIGN KEY constraint failed" in str(exc.orig)
    )


def is_check_violation(exc: IntegrityError) -> bool:
    """Check whether an IntegrityError was caused by a CHECK constraint."""
    return _sqlstate(exc) == CHECK_VIOLATION or "CHECK constraint failed" in str(
        exc.orig
    )


def translate_integrity_error(
    exc: IntegrityError,
    *,
    conflict_message: str,
    invalid_reference_message: str = "Invalid reference",
    invalid_value_message: str = "Invalid value",
) -> AppException:
    """Map a constraint violation to the matching client error.

    Args:
        exc: The IntegrityError raised while flushing
        conflict_message: Message for unique violations
        invalid_reference_message: Message for foreign key violations
        invalid_value_message: Message for CHECK constraint violations

    Returns:
        The exception to raise in place of the IntegrityError
    """
    if is_unique_violation(exc):
        return ConflictError(conflict_message)
    if is_foreign_key_violation(exc):
        return BadRequestError(invalid_reference_message)
    if is_check_violation(exc):
        return BadRequestError(invalid_value_message)
    return InternalError(detail=str(exc.orig))
