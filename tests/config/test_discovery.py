"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from compval.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    PYPROJECT_FILENAME,
    find_config,
    load_config,
    read_config_data,
)
from compval.config.models import CompvalConfig


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[identical]\nstrict = false\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_nearest_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        child = tmp_path / "child"
        child.mkdir()
        nearer = child / CONFIG_FILENAME
        nearer.write_text("")
        assert find_config(child) == nearer

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_pyproject_with_tool_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / PYPROJECT_FILENAME
        pyproject.write_text('[project]\nname = "x"\n\n[tool.compval.identical]\nstrict = false\n')
        assert find_config(tmp_path) == pyproject

    def test_pyproject_without_tool_table_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / PYPROJECT_FILENAME).write_text('[project]\nname = "x"\n')
        assert find_config(tmp_path) is None

    def test_malformed_pyproject_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / PYPROJECT_FILENAME).write_text("[project\n")
        assert find_config(tmp_path) is None

    def test_compval_toml_beats_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / PYPROJECT_FILENAME).write_text("[tool.compval]\n")
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert find_config(tmp_path) == config_file

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestReadConfigData:
    def test_reads_whole_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[less_than]\ninclusive = true\n")
        assert read_config_data(config_file) == {"less_than": {"inclusive": True}}

    def test_reads_tool_table_from_pyproject(self, tmp_path: Path) -> None:
        pyproject = tmp_path / PYPROJECT_FILENAME
        pyproject.write_text(
            '[project]\nname = "x"\n\n[tool.compval.less_than]\ninclusive = true\n'
        )
        assert read_config_data(pyproject) == {"less_than": {"inclusive": True}}


class TestLoadConfig:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            "[messages]\nmessage_length = 20\n"
            '[messages.templates]\nnotSame = "no match"\n'
            "[identical]\nliteral = true\n"
        )
        cfg = load_config(config_file)
        assert cfg.messages.message_length == 20
        assert cfg.messages.templates == {"notSame": "no match"}
        assert cfg.identical.literal is True
        assert cfg.identical.strict is True

    def test_returns_defaults_when_no_file(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == CompvalConfig()

    def test_discovers_from_cwd(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[less_than]\ninclusive = true\n")
        assert load_config(cwd=tmp_path).less_than.inclusive is True

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert load_config(config_file) == CompvalConfig()
