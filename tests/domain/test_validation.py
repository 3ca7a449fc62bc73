"""Tests for check_field and the result types."""

import pytest

from enumguard.domain.rules import string_enum
from enumguard.domain.validation import (
    DEFAULT_MESSAGE,
    FieldError,
    ValidationResult,
    check_field,
    resolve_message,
)


class TestCheckField:
    @pytest.mark.parametrize("value", ["ACTIVE", "INACTIVE"])
    def test_every_allowed_value_passes(self, value: str) -> None:
        rule = string_enum("ACTIVE", "INACTIVE")
        assert check_field(value, rule) == ValidationResult(ok=True)

    def test_value_outside_set_uses_fallback(self) -> None:
        result = check_field("PENDING", string_enum("ACTIVE", "INACTIVE"))
        assert result.ok is False
        assert result.message == DEFAULT_MESSAGE
        assert DEFAULT_MESSAGE == "value not in allowed set"

    def test_custom_message(self) -> None:
        result = check_field("Y", string_enum("X", message="bad value"))
        assert result.ok is False
        assert result.message == "bad value"

    def test_case_sensitive(self) -> None:
        assert check_field("a", string_enum("A")).ok is False

    def test_success_has_empty_message(self) -> None:
        assert check_field("A", string_enum("A", message="bad")).message == ""

    def test_overridden_default_message(self) -> None:
        result = check_field("B", string_enum("A"), default_message="nope")
        assert result.message == "nope"

    def test_none_fails_by_default(self) -> None:
        assert check_field(None, string_enum("A")).ok is False

    def test_none_passes_with_skip_none(self) -> None:
        assert check_field(None, string_enum("A"), skip_none=True).ok is True

    def test_skip_none_does_not_admit_other_values(self) -> None:
        assert check_field("B", string_enum("A"), skip_none=True).ok is False

    def test_idempotent(self) -> None:
        rule = string_enum("A")
        assert check_field("B", rule) == check_field("B", rule)


class TestResolveMessage:
    def test_prefers_rule_message(self) -> None:
        assert resolve_message(string_enum("A", message="custom")) == "custom"

    def test_falls_back(self) -> None:
        assert resolve_message(string_enum("A"), "fallback") == "fallback"


class TestFieldError:
    def test_to_dict(self) -> None:
        err = FieldError(field="status", value="X", message="m", stage="create")
        assert err.to_dict() == {
            "field": "status",
            "value": "X",
            "message": "m",
            "stage": "create",
        }
