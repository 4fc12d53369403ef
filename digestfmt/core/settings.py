"""
Settings loading.

Sources, highest priority first: explicit keyword arguments, environment
variables (``DIGESTFMT_<SECTION>__<FIELD>``), the TOML config file, model
defaults. The config file is ``.digestfmt/config.toml`` or the
``[tool.digestfmt]`` table of a ``pyproject.toml``, whichever is found
first walking up from the start directory.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import HashConfig, LoggingConfig

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".digestfmt"
CONFIG_FILE_NAME = "config.toml"
PYPROJECT_TABLE = "digestfmt"

_file_data: ContextVar[dict[str, Any]] = ContextVar("digestfmt_file_data", default={})


def _has_tool_table(pyproject: Path) -> bool:
    try:
        with open(pyproject, "rb") as f:
            return PYPROJECT_TABLE in tomllib.load(f).get("tool", {})
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug("Skipping unreadable %s: %s", pyproject, e)
        return False


def find_config_file(start_dir: str | None = None) -> Path | None:
    """Nearest config file at or above ``start_dir`` (default: cwd), or None."""
    start = Path(start_dir) if start_dir else Path.cwd()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate
        pyproject = directory / "pyproject.toml"
        if pyproject.exists() and _has_tool_table(pyproject):
            return pyproject
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Parse a config file into a plain dict.

    For ``pyproject.toml`` only the ``[tool.digestfmt]`` table is returned.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(f"Invalid TOML: {e}", file_path=str(path)) from e
    except OSError as e:
        raise ConfigFileError(f"Cannot read config file: {e}", file_path=str(path)) from e
    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get(PYPROJECT_TABLE, {})
    logger.debug("Loaded config from %s", path)
    return data


class _FileSource(PydanticBaseSettingsSource):
    """Feeds already-parsed config file data into the settings merge."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return _file_data.get().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(_file_data.get())


class DigestfmtSettings(BaseSettings):
    """Merged configuration; see the module docstring for source order."""

    model_config = SettingsConfigDict(
        env_prefix="DIGESTFMT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    hash: HashConfig = HashConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return init_settings, env_settings, _FileSource(settings_cls)

    def to_dict(self) -> dict[str, Any]:
        return {"hash": self.hash.model_dump(), "logging": self.logging.model_dump()}


def load_settings(
    config_path: Path | None = None, start_dir: str | None = None, **overrides: Any
) -> DigestfmtSettings:
    """
    Load settings from the config file, environment and ``overrides``.

    Args:
        config_path: Explicit config file; skips the directory search
        start_dir: Where the directory search begins (default: cwd)

    Raises:
        ConfigFileError: If the config file exists but cannot be parsed
        ConfigValidationError: If any merged value fails validation
    """
    path = config_path or find_config_file(start_dir)
    data = read_config_file(path) if path is not None else {}

    token = _file_data.set(data)
    try:
        return DigestfmtSettings(**overrides)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigValidationError(
            f"Invalid configuration: {e.error_count()} error(s)",
            fields=fields,
            file_path=str(path) if path else None,
        ) from e
    finally:
        _file_data.reset(token)
