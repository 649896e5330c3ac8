"""Success envelope shared by all API routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel


T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope for successful responses.

    Attributes:
        success: Always True
        data: The payload
        message: Optional human-readable note (e.g. on deletes)
        count: Number of items, for list responses
    """

    success: bool = True
    data: T | None = None
    message: str | None = None
    count: int | None = None
