"""Tests for lifecycle stage matching."""

import pytest

from enumguard.domain.lifecycle import (
    DEFAULT_STAGE,
    Stage,
    operation_stage,
    rule_applies,
    triggered_stages,
)


class TestStages:
    def test_default_is_save(self) -> None:
        assert DEFAULT_STAGE == "save"
        assert Stage.SAVE == "save"

    def test_operation_stage(self) -> None:
        assert operation_stage(is_new=True) == "create"
        assert operation_stage(is_new=False) == "update"


class TestRuleApplies:
    @pytest.mark.parametrize(
        ("rule_stage", "stage", "expected"),
        [
            ("save", "create", True),
            ("save", "update", True),
            ("save", "save", True),
            ("create", "create", True),
            ("create", "update", False),
            ("update", "update", True),
            ("update", "create", False),
            ("create", "save", False),
            ("publish", "publish", True),
            ("publish", "save", False),
            ("save", "publish", False),
        ],
    )
    def test_matrix(self, rule_stage: str, stage: str, expected: bool) -> None:
        assert rule_applies(rule_stage, stage) is expected

    def test_unknown_stage_triggers_only_itself(self) -> None:
        assert triggered_stages("archive") == frozenset({"archive"})
