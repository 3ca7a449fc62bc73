"""Shared pytest fixtures and test helpers for enumguard tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from enumguard.config.settings import EnumGuardSettings
from enumguard.infrastructure.store import Store

SAMPLE_TOML = """\
[entities.user]
columns = ["name"]

[entities.user.fields.status]
allowed_values = ["ACTIVE", "INACTIVE"]

[entities.user.fields.role]
allowed_values = ["admin", "member"]
message = "role must be admin or member"
on = "create"

[entities.user.fields.tier]
allowed_values = ["free", "pro"]
on = "update"

[entities.article]
columns = ["title"]

[entities.article.fields.visibility]
allowed_values = ["public", "private"]
on = "publish"
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory holding the sample ``enumguard.toml``."""
    monkeypatch.delenv("ENUMGUARD_CONFIG", raising=False)
    (tmp_path / "enumguard.toml").write_text(SAMPLE_TOML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> EnumGuardSettings:
    """Settings resolved from the sample project."""
    return EnumGuardSettings.from_cli(root=project_root)


@pytest.fixture
def store(settings: EnumGuardSettings) -> Generator[Store]:
    """Store over the sample entities with a fresh SQLite database."""
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the sample project so the CLI discovers its config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.chdir(project_root)
