"""Command line settings, read from the environment and TOML files."""

from __future__ import annotations
import pathlib
from typing import Any, Literal, Optional, Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    PyprojectTomlConfigSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

CONFIG_FILE = "pipecheck.toml"


class CheckConfig(BaseSettings):
    """Settings for ``pipecheck check`` and ``pipecheck explain``.

    Sources, highest priority first: keyword arguments (the CLI options),
    ``PIPECHECK_*`` environment variables, ``pipecheck.toml``, then the
    ``[tool.pipecheck]`` table of ``pyproject.toml``.
    """

    validator: Optional[str] = None
    log_level: str = "WARNING"
    output: Literal["table", "json"] = "table"

    model_config = SettingsConfigDict(
        env_prefix="PIPECHECK_",
        extra="forbid",
        toml_file=CONFIG_FILE,
        pyproject_toml_table_header=("tool", "pipecheck"),
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
            PyprojectTomlConfigSettingsSource(settings_cls),
        )


def _from_file(path: pathlib.Path) -> Type[CheckConfig]:
    # an explicit file replaces the files looked up in the working directory
    if path.name == "pyproject.toml":
        source = lambda cls: PyprojectTomlConfigSettingsSource(cls, toml_file=path)
    else:
        source = lambda cls: TomlConfigSettingsSource(cls, toml_file=path)

    class FileCheckConfig(CheckConfig):
        @classmethod
        def settings_customise_sources(cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings):
            return (init_settings, env_settings, source(settings_cls))

    return FileCheckConfig


def load_config(path: Optional[pathlib.Path] = None, **overrides: Any) -> CheckConfig:
    """Build the settings; overrides left as ``None`` fall through to lower sources."""
    settings_cls = CheckConfig
    if path is not None:
        path = pathlib.Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")
        settings_cls = _from_file(path)
    return settings_cls(**{k: v for k, v in overrides.items() if v is not None})
