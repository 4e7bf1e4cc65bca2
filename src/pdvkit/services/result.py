"""What every service call returns.

A rejected value is still a successful call (``ok=True`` with
``data["valid"] = False``). ``ok=False`` means the request itself could
not be handled, and ``error`` says why.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable ``code``, human ``message``, optional ``detail``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False only when the request could not be handled.
        op: Operation name: ``validate``, ``mask``, ``sanitize``,
            ``check_customer`` or ``scan``.
        data: Operation payload.
        warnings: Notes about the input that did not stop the operation.
        error: Set when ``ok`` is False.
        meta: Telemetry span tree under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build an ``ok=False`` result for *op*."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
