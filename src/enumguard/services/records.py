"""RecordService: persistence with before-save validation.

Every write runs the validation engine first. ``create`` runs at the
``create`` stage and ``update`` at the ``update`` stage; rules declared
``on="save"`` fire for both. A rejected record aborts only that
operation: nothing is written and the failure comes back as a
``VALIDATION_FAILED`` result.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from enumguard.domain.errors import UnknownEntityError, ValidationFailure
from enumguard.domain.lifecycle import DEFAULT_STAGE, operation_stage
from enumguard.services.base import BaseService
from enumguard.services.result import ServiceResult

if TYPE_CHECKING:
    from sqlalchemy import Column, Table

logger = logging.getLogger(__name__)


def _primary_key(table: Table) -> Column[Any]:
    return next(iter(table.primary_key.columns))


class RecordService(BaseService):
    """Create, update, fetch, and re-validate records of declared entities."""

    def _check_columns(
        self, op: str, table: Table, values: Mapping[str, Any]
    ) -> ServiceResult | None:
        unknown = sorted(set(values) - set(table.columns.keys()))
        if unknown:
            return self._error(
                op,
                "UNKNOWN_FIELD",
                f"Unknown fields for {table.name}: {', '.join(unknown)}",
                entity=table.name,
                fields=unknown,
            )
        return None

    def create(self, entity: str, values: Mapping[str, Any]) -> ServiceResult:
        """Validate and insert a new record."""
        op = "create_record"
        try:
            table = self._store.table(entity)
        except UnknownEntityError:
            return self._unknown_entity(op, entity)

        bad = self._check_columns(op, table, values)
        if bad is not None:
            return bad

        try:
            self._validator.ensure_valid(table, values, operation_stage(is_new=True))
        except ValidationFailure as exc:
            return self._validation_failed(op, exc)

        try:
            with self._store.transaction() as conn:
                result = conn.execute(table.insert().values(**values))
                record_id = result.inserted_primary_key[0]
        except IntegrityError as exc:
            return self._conflict(op, entity, exc)

        logger.debug("Created %s %s", entity, record_id)
        return ServiceResult(
            ok=True,
            op=op,
            data={"entity": entity, "id": record_id, "values": dict(values)},
        )

    def update(self, entity: str, record_id: Any, changes: Mapping[str, Any]) -> ServiceResult:
        """Apply *changes* to a stored record after validating the merged row."""
        op = "update_record"
        try:
            table = self._store.table(entity)
        except UnknownEntityError:
            return self._unknown_entity(op, entity)

        bad = self._check_columns(op, table, changes)
        if bad is not None:
            return bad

        pk = _primary_key(table)
        if pk.name in changes:
            return self._error(
                op,
                "INVALID_FIELD",
                f"Primary key '{pk.name}' cannot be changed",
                entity=entity,
                field=pk.name,
            )

        try:
            with self._store.transaction() as conn:
                row = conn.execute(select(table).where(pk == record_id)).first()
                if row is None:
                    return self._error(
                        op,
                        "NOT_FOUND",
                        f"No {entity} record with {pk.name}={record_id}",
                        entity=entity,
                        id=record_id,
                    )

                merged = {**row._mapping, **changes}
                self._validator.ensure_valid(table, merged, operation_stage(is_new=False))
                if changes:
                    conn.execute(table.update().where(pk == record_id).values(**changes))
        except ValidationFailure as exc:
            return self._validation_failed(op, exc)
        except IntegrityError as exc:
            return self._conflict(op, entity, exc)

        warnings = [] if changes else ["No changes given; record left as is"]
        return ServiceResult(
            ok=True,
            op=op,
            data={"entity": entity, "id": record_id, "values": merged},
            warnings=warnings,
        )

    def get(self, entity: str, record_id: Any) -> ServiceResult:
        """Fetch a stored record."""
        op = "get_record"
        try:
            table = self._store.table(entity)
        except UnknownEntityError:
            return self._unknown_entity(op, entity)

        pk = _primary_key(table)
        with self._store.engine.connect() as conn:
            row = conn.execute(select(table).where(pk == record_id)).first()
        if row is None:
            return self._error(
                op,
                "NOT_FOUND",
                f"No {entity} record with {pk.name}={record_id}",
                entity=entity,
                id=record_id,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"entity": entity, "id": record_id, "values": dict(row._mapping)},
        )

    def validate(self, entity: str, record_id: Any, stage: str = DEFAULT_STAGE) -> ServiceResult:
        """Evaluate a stored record at *stage* without writing.

        Custom stage keys (e.g. ``"publish"``) only fire rules declared
        with that exact key.
        """
        op = "validate_record"
        fetched = self.get(entity, record_id)
        if not fetched.ok:
            return fetched.model_copy(update={"op": op})

        table = self._store.table(entity)
        values = fetched.data["values"]
        try:
            self._validator.ensure_valid(table, values, stage)
        except ValidationFailure as exc:
            return self._validation_failed(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "entity": entity,
                "id": record_id,
                "stage": stage,
                "rules_checked": len(self._validator.applicable_rules(table, stage)),
            },
        )
