"""Tests for EnumGuardSettings with TOML source."""

from pathlib import Path

import click
import pytest

from enumguard.config.settings import EnumGuardSettings


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ENUMGUARD_CONFIG", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = EnumGuardSettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.validation.default_message == "value not in allowed set"
        assert settings.entities == {}

    def test_frozen(self, tmp_path: Path) -> None:
        settings = EnumGuardSettings.from_cli(root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_db_path_relative_to_root(self, tmp_path: Path) -> None:
        settings = EnumGuardSettings.from_cli(root=tmp_path)
        assert settings.db_path == tmp_path / ".enumguard" / "enumguard.db"


class TestTomlSource:
    def test_loads_entities(self, project_root: Path) -> None:
        settings = EnumGuardSettings.from_cli(root=project_root)
        assert settings.config_path == project_root / "enumguard.toml"
        assert set(settings.entities) == {"user", "article"}
        role = settings.entities["user"].fields["role"]
        assert role.on == "create"

    def test_sparse_override(self, tmp_path: Path) -> None:
        (tmp_path / "enumguard.toml").write_text('[validation]\ndefault_message = "nope"\n')
        settings = EnumGuardSettings.from_cli(root=tmp_path)
        assert settings.validation.default_message == "nope"
        assert settings.validation.skip_none is False

    def test_root_from_config_parent(self, tmp_path: Path) -> None:
        custom = tmp_path / "proj" / "custom.toml"
        custom.parent.mkdir()
        custom.write_text("")
        settings = EnumGuardSettings.from_cli(config_path=str(custom))
        assert settings.root == custom.parent
        assert settings.config_path == custom

    def test_absolute_db_path(self, tmp_path: Path) -> None:
        db = tmp_path / "elsewhere.db"
        (tmp_path / "enumguard.toml").write_text(f'[database]\npath = "{db.as_posix()}"\n')
        settings = EnumGuardSettings.from_cli(root=tmp_path)
        assert settings.db_path == db

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "enumguard.toml").write_text("[validation\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            EnumGuardSettings.from_cli(root=tmp_path)


class TestPriority:
    def test_cli_flags_win(self, tmp_path: Path) -> None:
        settings = EnumGuardSettings.from_cli(root=tmp_path, verbose=True)
        assert settings.verbose is True

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "enumguard.toml").write_text("[validation]\nskip_none = false\n")
        monkeypatch.setenv("ENUMGUARD_VALIDATION__SKIP_NONE", "true")
        settings = EnumGuardSettings.from_cli(root=tmp_path)
        assert settings.validation.skip_none is True
