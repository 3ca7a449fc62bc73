"""AuditService: find stored values that violate declared rules.

Rows can predate a rule, or be written without going through
RecordService. The audit scans them the way the validation engine would
at a given stage and reports every violation. Read-only.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select

from enumguard.domain.errors import UnknownEntityError
from enumguard.domain.lifecycle import DEFAULT_STAGE
from enumguard.services.base import BaseService
from enumguard.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AuditService(BaseService):
    """Reports rule violations in stored records."""

    def audit(self, entity: str | None = None, stage: str = DEFAULT_STAGE) -> ServiceResult:
        """Scan one entity (or all) for values violating rules that fire at *stage*."""
        op = "audit"
        names = [entity] if entity is not None else self._store.entities
        issues: list[dict[str, Any]] = []
        rows_scanned = 0

        for name in names:
            try:
                table = self._store.table(name)
            except UnknownEntityError:
                return self._unknown_entity(op, name)

            rules = self._validator.applicable_rules(table, stage)
            if not rules:
                continue

            pk = next(iter(table.primary_key.columns))
            columns = [pk, *(table.c[field_name] for field_name in rules)]
            with self._store.engine.connect() as conn:
                rows = conn.execute(select(*columns).order_by(pk)).all()

            for row in rows:
                rows_scanned += 1
                mapping = row._mapping
                for field_name, rule in rules.items():
                    value = mapping[field_name]
                    result = self._validator.check(value, rule)
                    if not result.ok:
                        issues.append(
                            {
                                "entity": name,
                                "id": mapping[pk.name],
                                "field": field_name,
                                "value": value,
                                "message": result.message,
                            }
                        )

        if issues:
            logger.info("Audit found %d rule violations", len(issues))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "stage": stage,
                "rows_scanned": rows_scanned,
                "issues": issues,
                "count": len(issues),
                "healthy": not issues,
            },
        )
