"""Config file discovery and loading.

Walk-up finder locates ``compval.toml`` or a ``pyproject.toml`` carrying a
``[tool.compval]`` table, nearest directory first. ``compval.toml`` wins
when both sit in the same directory. The ``COMPVAL_CONFIG`` env var and
the ``--config`` CLI flag bypass discovery.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from compval.config.models import CompvalConfig

CONFIG_FILENAME = "compval.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "COMPVAL_CONFIG"


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return "compval" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a config file.

    Returns the path to the config file, or None if not found.
    Checks COMPVAL_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Parse *path* and return the compval table.

    For ``pyproject.toml`` that is ``[tool.compval]``; any other file is
    read whole.

    Raises:
        tomllib.TOMLDecodeError: The file is not valid TOML.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        table: dict[str, Any] = data.get("tool", {}).get("compval", {})
        return table
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> CompvalConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default CompvalConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return CompvalConfig()

    return CompvalConfig.model_validate(read_config_data(path))
