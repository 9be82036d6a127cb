"""
Discriminated result returned by every presentation-facing operation.

Callers branch on ``success``; ``message`` is always suitable for
display and ``error`` names the error kind (``"ValidationError"``,
``"ConflictError"``, ``"LimitExceededError"`` or ``"NotFoundError"``)
when the operation was rejected.

``data`` holds copies of the catalog records, so editing a result never
changes the store behind the services' back.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def _detached(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_copy(deep=True)
    if isinstance(data, list):
        return [_detached(item) for item in data]
    return data


class OperationResult(BaseModel, Generic[T]):
    success: bool
    message: str
    error: Optional[str] = None
    data: Optional[T] = None

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "OperationResult[T]":
        return cls(success=True, message=message, data=_detached(data))

    @classmethod
    def fail(cls, exc: Exception) -> "OperationResult[T]":
        return cls(success=False, message=str(exc), error=type(exc).__name__)
