"""SQLAlchemy Core tables carrying field rules.

A rule is attached to its column through ``Column.info`` when the table
is declared, so the validation engine reads it back from the schema
instead of discovering it by introspecting model classes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy import Column, Integer, MetaData, Table, Text

from enumguard.domain.errors import DeclarationError
from enumguard.domain.rules import StringEnumRule

if TYPE_CHECKING:
    from enumguard.config.models import EntityConfig

logger = logging.getLogger(__name__)

RULE_INFO_KEY = "string_enum"


def enum_column(name: str, rule: StringEnumRule, *args: Any, **kwargs: Any) -> Column[str]:
    """Declare a ``Text`` column constrained by *rule*."""
    if not isinstance(rule, StringEnumRule):
        raise DeclarationError(f"Column '{name}' needs a StringEnumRule, got {rule!r}")
    info = dict(kwargs.pop("info", None) or {})
    info[RULE_INFO_KEY] = rule
    return Column(name, Text, *args, info=info, **kwargs)


def column_rule(column: Column[Any]) -> StringEnumRule | None:
    """The rule attached to *column*, if any."""
    return column.info.get(RULE_INFO_KEY)


def field_rules(table: Table) -> dict[str, StringEnumRule]:
    """Map of column name to rule for every rule-bearing column, in column order."""
    rules: dict[str, StringEnumRule] = {}
    for column in table.columns:
        rule = column_rule(column)
        if rule is not None:
            rules[column.name] = rule
    return rules


def build_table(metadata: MetaData, name: str, entity: EntityConfig) -> Table:
    """Build the table for a TOML-declared entity.

    Raises:
        DeclarationError: A field rule is malformed or a column name is
            declared twice.
    """
    columns: list[Column[Any]] = [
        Column(entity.primary_key, Integer, primary_key=True, autoincrement=True)
    ]
    seen = {entity.primary_key}

    for col_name in entity.columns:
        if col_name in seen:
            raise DeclarationError(f"{name}: column '{col_name}' declared twice")
        seen.add(col_name)
        columns.append(Column(col_name, Text))

    for field_name, field_cfg in entity.fields.items():
        if field_name in seen:
            raise DeclarationError(f"{name}: column '{field_name}' declared twice")
        seen.add(field_name)
        try:
            rule = field_cfg.to_rule()
        except DeclarationError as exc:
            raise DeclarationError(f"{name}.{field_name}: {exc}") from exc
        columns.append(enum_column(field_name, rule))

    table = Table(name, metadata, *columns)
    logger.debug("Registered entity %s with %d field rules", name, len(entity.fields))
    return table


def build_metadata(entities: Mapping[str, EntityConfig]) -> MetaData:
    """Build a :class:`MetaData` holding one table per declared entity."""
    metadata = MetaData()
    for name, entity in entities.items():
        build_table(metadata, name, entity)
    return metadata
