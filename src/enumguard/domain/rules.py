"""Enumerated-string field rule declarations.

A :class:`StringEnumRule` is read-only metadata attached to one field of
a data-model entity. It names the closed set of permitted values, an
optional custom message, and the lifecycle stage at which a validation
engine should check it. The rule performs no validation on its own.

INVARIANT: ``allowed_values`` is non-empty, all ``str``, no duplicates.
Violations raise :class:`DeclarationError` at construction, never later.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from enumguard.domain.errors import DeclarationError
from enumguard.domain.lifecycle import DEFAULT_STAGE


@dataclass(frozen=True)
class StringEnumRule:
    """Closed set of string values permitted for a single field.

    Attributes:
        allowed_values: Permitted values in declaration order. Order only
            matters when rendering messages; matching is set membership.
        message: Custom failure message, or ``""`` for the consumer's
            generic default.
        stage: Lifecycle-stage key at which the rule is checked.
    """

    allowed_values: tuple[str, ...]
    message: str = ""
    stage: str = DEFAULT_STAGE
    _members: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        values = self.allowed_values
        if isinstance(values, str) or not isinstance(values, Iterable):
            msg = f"allowed_values must be a sequence of strings, got {type(values).__name__}"
            raise DeclarationError(msg)
        values = tuple(values)
        if not values:
            raise DeclarationError("allowed_values must contain at least one value")
        bad = [v for v in values if not isinstance(v, str)]
        if bad:
            raise DeclarationError(f"allowed_values must all be strings, got {bad!r}")
        dupes = sorted({v for v in values if values.count(v) > 1})
        if dupes:
            raise DeclarationError(f"Duplicate allowed_values: {dupes}")
        if not isinstance(self.message, str):
            raise DeclarationError("message must be a string")
        if not isinstance(self.stage, str) or not self.stage:
            raise DeclarationError("stage must be a non-empty string")

        object.__setattr__(self, "allowed_values", values)
        object.__setattr__(self, "_members", frozenset(values))

    def allows(self, value: object) -> bool:
        """Exact, case-sensitive membership test."""
        return isinstance(value, str) and value in self._members


def string_enum(*values: str, message: str = "", on: str = DEFAULT_STAGE) -> StringEnumRule:
    """Declare a :class:`StringEnumRule` at a field definition site.

    Usage::

        status = enum_column("status", string_enum("ACTIVE", "INACTIVE"))
    """
    return StringEnumRule(allowed_values=values, message=message, stage=on)
