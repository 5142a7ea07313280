"""CompvalSettings — the resolved configuration for one CLI invocation.

Sources, strongest first:

1. keyword arguments (the global CLI flags),
2. ``COMPVAL_*`` environment variables, ``__`` separating nested fields
   (``COMPVAL_IDENTICAL__STRICT=false``),
3. the discovered TOML file (see :mod:`compval.config.discovery`),
4. the defaults on the section models.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from compval.config.discovery import find_config, read_config_data
from compval.config.models import IdenticalConfig, LessThanConfig, MessagesConfig

# Path of the TOML file feeding the settings currently being built.
_toml_path: ContextVar[Path | None] = ContextVar("compval_toml_path", default=None)


class DiscoveredTomlSource(PydanticBaseSettingsSource):
    """Settings read from ``compval.toml`` or a ``[tool.compval]`` table."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self.path = path
        self.table: dict[str, Any] = self._read(path) if path is not None else {}

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            return read_config_data(path)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self.table.get(field_name), field_name, field_name in self.table

    def __call__(self) -> dict[str, Any]:
        return dict(self.table)


class CompvalSettings(BaseSettings):
    """Global flags plus the ``[messages]``, ``[less_than]`` and
    ``[identical]`` sections.

    ``config_path`` records which file was read; it is None when no file
    was found and everything came from the environment and defaults.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "COMPVAL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    less_than: LessThanConfig = Field(default_factory=LessThanConfig)
    identical: IdenticalConfig = Field(default_factory=IdenticalConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No dotenv or secrets directory; the TOML file sits below env vars.
        toml = DiscoveredTomlSource(settings_cls, _toml_path.get())
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **flags: Any,
    ) -> CompvalSettings:
        """Build settings for a CLI run.

        An explicit *config_path* replaces discovery; if it does not point
        at a file, no TOML is read at all. Otherwise the file is discovered
        from *start* (default: the working directory).
        """
        if config_path:
            candidate = Path(config_path)
            path = candidate if candidate.is_file() else None
        else:
            path = find_config(start)

        token = _toml_path.set(path)
        try:
            return cls(config_path=path, **flags)
        finally:
            _toml_path.reset(token)
