"""The field check a validation engine runs against a :class:`StringEnumRule`."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from enumguard.domain.rules import StringEnumRule

DEFAULT_MESSAGE = "value not in allowed set"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking one value against one rule."""

    ok: bool
    message: str = ""


@dataclass(frozen=True)
class FieldError:
    """A failed check, associated with the field it was run for."""

    field: str
    value: Any
    message: str
    stage: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def resolve_message(rule: StringEnumRule, default_message: str = DEFAULT_MESSAGE) -> str:
    """The rule's own message when set, otherwise *default_message*."""
    return rule.message or default_message


def check_field(
    value: object,
    rule: StringEnumRule,
    *,
    default_message: str = DEFAULT_MESSAGE,
    skip_none: bool = False,
) -> ValidationResult:
    """Check *value* against *rule*.

    Succeeds iff *value* is one of ``rule.allowed_values`` (exact string
    equality, no normalization). ``None`` fails unless *skip_none* is set.
    """
    if value is None and skip_none:
        return ValidationResult(ok=True)
    if rule.allows(value):
        return ValidationResult(ok=True)
    return ValidationResult(ok=False, message=resolve_message(rule, default_message))
