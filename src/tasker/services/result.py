"""What every service method returns.

Services never print or exit. They hand a :class:`ServiceResult` to the
command layer, which renders it and picks the exit code.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    STORAGE_ERROR = "STORAGE_ERROR"
    NOT_FOUND = "NOT_FOUND"
    EXPORT_TARGET_UNAVAILABLE = "EXPORT_TARGET_UNAVAILABLE"


class ServiceError(BaseModel):
    """Why an operation failed: a stable code plus a human message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one task operation.

    ``op`` names the operation (``add``, ``list``, ``done``, ``export`` ...)
    and selects the renderer. ``data`` is the payload on success; ``error``
    is set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
