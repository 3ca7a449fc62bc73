"""Lifecycle stages at which field rules are evaluated.

A persistence operation runs at ``create`` (new record) or ``update``
(existing record). Rules declared ``on="save"`` fire for both. Any other
stage key is opaque and matches only rules declared with that exact key.
"""

from __future__ import annotations

from enum import StrEnum


class Stage(StrEnum):
    """Built-in lifecycle stages."""

    SAVE = "save"
    CREATE = "create"
    UPDATE = "update"


DEFAULT_STAGE = str(Stage.SAVE)

# Operation stage -> rule stages that fire during it.
STAGE_TRIGGERS: dict[str, frozenset[str]] = {
    "create": frozenset({"save", "create"}),
    "update": frozenset({"save", "update"}),
}


def triggered_stages(stage: str) -> frozenset[str]:
    """Return the rule stages evaluated when running *stage*."""
    return STAGE_TRIGGERS.get(stage, frozenset({stage}))


def rule_applies(rule_stage: str, stage: str) -> bool:
    """Check whether a rule declared for *rule_stage* fires at *stage*."""
    return rule_stage in triggered_stages(stage)


def operation_stage(is_new: bool) -> str:
    """Stage key for a save of a new (``create``) or existing (``update``) record."""
    return str(Stage.CREATE) if is_new else str(Stage.UPDATE)
