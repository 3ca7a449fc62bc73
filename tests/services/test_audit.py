"""Tests for AuditService."""

from enumguard.infrastructure.store import Store
from enumguard.services.audit import AuditService


def _insert_raw(store: Store, entity: str, **values: str) -> None:
    """Write a row without going through validation."""
    table = store.table(entity)
    with store.transaction() as conn:
        conn.execute(table.insert().values(**values))


class TestAudit:
    def test_empty_database_is_healthy(self, store: Store) -> None:
        result = AuditService(store).audit()
        assert result.ok
        assert result.data["healthy"] is True
        assert result.data["count"] == 0

    def test_reports_violations(self, store: Store) -> None:
        _insert_raw(store, "user", status="ACTIVE", role="admin")
        _insert_raw(store, "user", status="active", role="admin")
        result = AuditService(store).audit("user")
        assert result.ok
        assert result.data["rows_scanned"] == 2
        assert result.data["healthy"] is False
        assert result.data["issues"] == [
            {
                "entity": "user",
                "id": 2,
                "field": "status",
                "value": "active",
                "message": "value not in allowed set",
            }
        ]

    def test_stage_selects_rules(self, store: Store) -> None:
        _insert_raw(store, "user", status="ACTIVE", role="owner")
        assert AuditService(store).audit("user").data["count"] == 0
        issues = AuditService(store).audit("user", stage="create").data["issues"]
        assert [i["field"] for i in issues] == ["role"]
        assert issues[0]["message"] == "role must be admin or member"

    def test_custom_stage(self, store: Store) -> None:
        _insert_raw(store, "article", title="t", visibility="secret")
        result = AuditService(store).audit(stage="publish")
        assert [i["entity"] for i in result.data["issues"]] == ["article"]

    def test_unknown_entity(self, store: Store) -> None:
        result = AuditService(store).audit("ghost")
        assert result.error is not None
        assert result.error.code == "UNKNOWN_ENTITY"
