"""Exception types raised by rule declaration and validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from enumguard.domain.validation import FieldError


class DeclarationError(ValueError):
    """A field rule was declared with an empty or malformed value set.

    Raised at data-model load time. Fatal to the declaring entity's
    registration.
    """


class UnknownEntityError(KeyError):
    """Lookup of an entity that was never declared."""

    def __init__(self, entity: str) -> None:
        super().__init__(entity)
        self.entity = entity

    def __str__(self) -> str:
        return f"Unknown entity: {self.entity}"


class ValidationFailure(Exception):
    """One or more field rules rejected a record at a lifecycle stage.

    Recoverable: the caller aborts the persistence operation that
    triggered validation and reports :attr:`errors`.
    """

    def __init__(self, entity: str, errors: list[FieldError]) -> None:
        self.entity = entity
        self.errors = errors
        fields = ", ".join(e.field for e in errors)
        super().__init__(f"Validation failed for {entity}: {fields}")
