"""Shared pytest fixtures for compval tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from compval.config.settings import CompvalSettings


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's COMPVAL_* environment out of the tests."""
    monkeypatch.delenv("COMPVAL_CONFIG", raising=False)
    monkeypatch.delenv("COMPVAL_IDENTICAL__STRICT", raising=False)
    monkeypatch.delenv("COMPVAL_IDENTICAL__LITERAL", raising=False)
    monkeypatch.delenv("COMPVAL_LESS_THAN__INCLUSIVE", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty working directory with no config file."""
    work = tmp_path / "work"
    work.mkdir()
    return work


@pytest.fixture
def settings(workdir: Path) -> CompvalSettings:
    """Default settings, discovered from an empty directory."""
    return CompvalSettings.from_cli(start=workdir)


@pytest.fixture
def _isolated_cwd(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty directory so the CLI finds no config.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(workdir)


@pytest.fixture
def form_context() -> dict[str, object]:
    """A nested form submission used as resolution context."""
    return {
        "email": "john@doe.com",
        "user": {
            "email": "john@doe.com",
            "profile": {"age": 42, "tags": ["admin", "ops"]},
        },
    }
