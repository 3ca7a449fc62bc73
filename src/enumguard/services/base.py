"""BaseService: shared foundation for enumguard services.

Every service receives a :class:`Store` at construction time and builds
its :class:`ValidationEngine` from the store's ``[validation]`` settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from enumguard.services.engine import ValidationEngine
from enumguard.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from enumguard.domain.errors import ValidationFailure
    from enumguard.infrastructure.store import Store


class BaseService:
    """Base for all service-layer classes."""

    def __init__(self, store: Store) -> None:
        self._store = store
        self._validator = ValidationEngine.from_config(store.settings.validation)

    @staticmethod
    def _error(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    def _unknown_entity(self, op: str, entity: str) -> ServiceResult:
        return self._error(
            op,
            "UNKNOWN_ENTITY",
            f"Unknown entity: {entity}",
            entity=entity,
            known=self._store.entities,
        )

    @classmethod
    @classmethod
    def _conflict(cls, op: str, entity: str, exc: Exception) -> ServiceResult:
        reason = str(getattr(exc, "orig", exc))
        return cls._error(op, "CONFLICT", f"{entity}: {reason}", entity=entity)

    def _validation_failed(cls, op: str, exc: ValidationFailure) -> ServiceResult:
        return cls._error(
            op,
            "VALIDATION_FAILED",
            "; ".join(f"{e.field}: {e.message}" for e in exc.errors),
            entity=exc.entity,
            errors=[e.to_dict() for e in exc.errors],
        )
