"""ValidationService: ad-hoc checks against declared rules.

Checks a single value against the rule declared on an entity field, or
lists declared rules, without reading or writing stored records.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from enumguard.domain.errors import UnknownEntityError
from enumguard.domain.lifecycle import rule_applies, triggered_stages
from enumguard.infrastructure.database.schema import field_rules
from enumguard.services.base import BaseService
from enumguard.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from enumguard.domain.rules import StringEnumRule


def describe_rule(entity: str, field_name: str, rule: StringEnumRule) -> dict[str, Any]:
    """JSON-ready description of a declared rule."""
    return {
        "entity": entity,
        "field": field_name,
        "allowed_values": list(rule.allowed_values),
        "message": rule.message,
        "stage": rule.stage,
    }


class ValidationService(BaseService):
    """Checks values against declared rules."""

    def list_rules(self, entity: str | None = None) -> ServiceResult:
        """List declared rules for one entity, or all of them."""
        op = "list_rules"
        names = [entity] if entity is not None else self._store.entities
        rules: list[dict[str, Any]] = []
        for name in names:
            try:
                table = self._store.table(name)
            except UnknownEntityError:
                return self._unknown_entity(op, name)
            rules.extend(describe_rule(name, f, r) for f, r in field_rules(table).items())
        return ServiceResult(ok=True, op=op, data={"rules": rules, "count": len(rules)})

    def check_value(
        self,
        entity: str,
        field_name: str,
        value: str | None,
        stage: str | None = None,
    ) -> ServiceResult:
        """Check *value* against the rule declared on ``entity.field_name``.

        With no *stage*, the rule is evaluated at its own declared stage.
        A rule that does not fire at an explicit *stage* is reported as
        ``ok`` with ``applies=False`` and a warning.
        """
        op = "check_value"
        try:
            table = self._store.table(entity)
        except UnknownEntityError:
            return self._unknown_entity(op, entity)

        rule = field_rules(table).get(field_name)
        if rule is None:
            return self._error(
                op,
                "UNKNOWN_FIELD",
                f"No rule declared on {entity}.{field_name}",
                entity=entity,
                field=field_name,
            )

        if stage is None:
            stage = rule.stage
        applies = rule_applies(rule.stage, stage)
        data: dict[str, Any] = {
            "entity": entity,
            "field": field_name,
            "value": value,
            "stage": stage,
            "applies": applies,
        }
        if not applies:
            stages = ", ".join(sorted(triggered_stages(stage)))
            return ServiceResult(
                ok=True,
                op=op,
                data=data,
                warnings=[
                    f"Rule on {entity}.{field_name} runs at '{rule.stage}', not at: {stages}"
                ],
            )

        result = self._validator.check(value, rule)
        if not result.ok:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_VALUE",
                    message=result.message,
                    detail={**data, "allowed_values": list(rule.allowed_values)},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data)
