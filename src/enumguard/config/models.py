"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, enumguard.toml only contains
overrides and entity declarations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from enumguard.domain.lifecycle import DEFAULT_STAGE
from enumguard.domain.rules import StringEnumRule
from enumguard.domain.validation import DEFAULT_MESSAGE


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    path: Path = Path(".enumguard/enumguard.db")


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    default_message: str = DEFAULT_MESSAGE
    skip_none: bool = False


class FieldRuleConfig(BaseModel):
    """[entities.<name>.fields.<field>] section.

    Mirrors the declaration keywords: ``allowed_values``, ``message``, ``on``.
    Values are taken as written; the rule rejects a missing, empty or
    non-string set when it is built, so TOML mistakes surface as
    ``DeclarationError`` like code-declared ones.
    """

    model_config = {"frozen": True}

    allowed_values: Any = None
    message: Any = ""
    on: Any = DEFAULT_STAGE

    def to_rule(self) -> StringEnumRule:
        """Build the rule. Raises ``DeclarationError`` on a bad value set."""
        return StringEnumRule(
            allowed_values=self.allowed_values,
            message=self.message,
            stage=self.on,
        )


class EntityConfig(BaseModel):
    """[entities.<name>] section."""

    model_config = {"frozen": True}

    primary_key: str = "id"
    columns: list[str] = Field(default_factory=list)
    fields: dict[str, FieldRuleConfig] = Field(default_factory=dict)

