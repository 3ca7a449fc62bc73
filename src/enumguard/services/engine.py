"""Validation engine for enumerated-string field rules.

:class:`ValidationEngine` reads the rules attached to a table's columns
and evaluates those that apply at a lifecycle stage against a mapping of
column values. It has no database access and no state beyond its
configured message and ``None`` handling, so the same inputs always
produce the same errors.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from enumguard.domain.errors import ValidationFailure
from enumguard.domain.lifecycle import DEFAULT_STAGE, rule_applies
from enumguard.domain.validation import (
    DEFAULT_MESSAGE,
    FieldError,
    ValidationResult,
    check_field,
)
from enumguard.infrastructure.database.schema import field_rules

if TYPE_CHECKING:
    from sqlalchemy import Table

    from enumguard.config.models import ValidationConfig
    from enumguard.domain.rules import StringEnumRule

logger = logging.getLogger(__name__)


class ValidationEngine:
    """Evaluates field rules at lifecycle stages."""

    def __init__(self, *, default_message: str = DEFAULT_MESSAGE, skip_none: bool = False) -> None:
        self.default_message = default_message
        self.skip_none = skip_none

    @classmethod
    def from_config(cls, config: ValidationConfig) -> ValidationEngine:
        return cls(default_message=config.default_message, skip_none=config.skip_none)

    def check(self, value: object, rule: StringEnumRule) -> ValidationResult:
        """Check one value against one rule."""
        return check_field(
            value,
            rule,
            default_message=self.default_message,
            skip_none=self.skip_none,
        )

    def applicable_rules(self, table: Table, stage: str) -> dict[str, StringEnumRule]:
        """Rules on *table* that fire at *stage*, in column order."""
        return {
            name: rule
            for name, rule in field_rules(table).items()
            if rule_applies(rule.stage, stage)
        }

    def validate(
        self,
        table: Table,
        values: Mapping[str, Any],
        stage: str = DEFAULT_STAGE,
    ) -> list[FieldError]:
        """Return an error for each applicable rule that *values* violates.

        Columns absent from *values* are checked as ``None``.
        """
        errors: list[FieldError] = []
        for field_name, rule in self.applicable_rules(table, stage).items():
            value = values.get(field_name)
            result = self.check(value, rule)
            if not result.ok:
                errors.append(
                    FieldError(field=field_name, value=value, message=result.message, stage=stage)
                )
        return errors

    def ensure_valid(
        self,
        table: Table,
        values: Mapping[str, Any],
        stage: str = DEFAULT_STAGE,
    ) -> None:
        """Raise :class:`ValidationFailure` if any applicable rule is violated."""
        errors = self.validate(table, values, stage)
        if errors:
            logger.info(
                "Validation failed for %s at %s: %s",
                table.name,
                stage,
                ", ".join(e.field for e in errors),
            )
            raise ValidationFailure(table.name, errors)
