"""TaskerSettings: one frozen object for CLI flags, env vars and tasker.toml.

Precedence, highest first: CLI flags, ``TASKER_*`` environment variables
(``TASKER_STORAGE__DB_FILE`` for nested keys), the discovered
``tasker.toml``, then the defaults in :mod:`tasker.config.models`.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from tasker.config.discovery import find_config
from tasker.config.models import ExportConfig, StorageConfig

# The TOML file for the settings object currently being built.
_toml_file: ContextVar[Path | None] = ContextVar("tasker_toml_file", default=None)


class TaskerSettings(BaseSettings):
    """Resolved configuration for one tasker invocation.

    Attributes:
        project_root: Directory holding ``tasker.toml``, or the cwd.
        config_path: The config file in effect, if any.
        db_path: ``--db`` / ``TASKER_DB_PATH``; wins over ``storage.db_file``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TASKER_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    db_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    storage: StorageConfig = Field(default_factory=StorageConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @property
    def database_path(self) -> Path:
        """Database file: ``db_path`` if set, else ``storage.db_file`` under the project root."""
        if self.db_path is not None:
            return self.db_path
        return self.project_root / self.storage.db_file

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_file = _toml_file.get()
        if toml_file is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_file))
        return tuple(sources)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        db_path: str | Path | None = None,
        **cli_flags: Any,
    ) -> TaskerSettings:
        """Build settings for a CLI run.

        ``--config`` names the TOML file; without it the file is found by
        walking up from *project_root* (or the cwd). The project root
        defaults to the directory that holds the config file.

        Raises:
            click.ClickException: The config file is not valid TOML.
        """
        if config_path:
            toml_file = Path(config_path) if Path(config_path).is_file() else None
        else:
            toml_file = find_config(project_root)

        if project_root is None:
            project_root = toml_file.parent if toml_file else Path.cwd()
        if db_path is not None:
            cli_flags["db_path"] = Path(db_path)

        token = _toml_file.set(toml_file)
        try:
            return cls(project_root=project_root, config_path=toml_file, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_file}: {exc}") from exc
        finally:
            _toml_file.reset(token)
