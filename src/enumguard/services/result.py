"""ServiceResult and ServiceError, the universal service contract.

INVARIANT: All public service methods return ServiceResult.
A rejected value or unknown entity is an ``ok=False`` result, not an
exception; the CLI and any embedding application consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    Codes in use: ``UNKNOWN_ENTITY``, ``UNKNOWN_FIELD``, ``INVALID_FIELD``,
    ``NOT_FOUND``, ``INVALID_VALUE``, ``VALIDATION_FAILED``, ``CONFLICT``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_record"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
