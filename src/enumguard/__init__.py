"""enumguard: enumerated-string field rules for table-backed data models."""

from __future__ import annotations

from enumguard.domain.errors import DeclarationError, ValidationFailure
from enumguard.domain.rules import StringEnumRule, string_enum
from enumguard.domain.validation import DEFAULT_MESSAGE, ValidationResult, check_field
from enumguard.infrastructure.database.schema import enum_column, field_rules

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MESSAGE",
    "DeclarationError",
    "StringEnumRule",
    "ValidationFailure",
    "ValidationResult",
    "check_field",
    "enum_column",
    "field_rules",
    "string_enum",
]
