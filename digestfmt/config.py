"""Reading and writing ``.digestfmt/config.toml`` for the ``config`` command."""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .core.exceptions import ConfigFileError, ConfigValidationError
from .core.models.config import DigestfmtConfig
from .core.settings import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    find_config_file,
    load_settings,
    read_config_file,
)

# Keys `digestfmt config` accepts, with the help shown by `config list`.
CONFIGURABLE_KEYS: dict[str, str] = {
    "hash.default": "Algorithm used when none is given (unset: strongest available)",
    "logging.level": "Log level (debug, info, warning, error)",
    "logging.console": "Write diagnostics to stderr",
    "logging.file": "Write diagnostics to ~/.digestfmt/digestfmt.log",
}


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """Effective configuration (file, environment and defaults merged) as a dict."""
    return load_settings(config_path=config_path, start_dir=start_dir).to_dict()


def get_config_path_for_write(start_dir: str | None = None) -> Path:
    """The existing ``.digestfmt/config.toml`` above ``start_dir``, else a new one in it."""
    existing = find_config_file(start_dir)
    if existing is not None and existing.name == CONFIG_FILE_NAME:
        return existing
    base = Path(start_dir) if start_dir else Path.cwd()
    return base / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _toml_value(val: Any) -> str:
    if isinstance(val, bool):
        return "true" if val else "false"
    if isinstance(val, str):
        return '"' + val.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return str(val)


def save_config(config: dict, config_path: Path) -> None:
    """
    Write ``config`` as TOML, leaving out values equal to their defaults.

    Raises:
        ConfigFileError: If the file cannot be written
    """
    defaults = DigestfmtConfig().to_dict()
    out: list[str] = []
    for section, values in config.items():
        changed = [
            f"{name} = {_toml_value(val)}"
            for name, val in values.items()
            if val is not None and val != defaults.get(section, {}).get(name)
        ]
        if changed:
            out += [f"[{section}]", *changed, ""]

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text("\n".join(out))
    except OSError as e:
        raise ConfigFileError(f"Cannot write config file: {e}", file_path=str(config_path)) from e


def _check_key(key: str) -> None:
    if key not in CONFIGURABLE_KEYS:
        raise ConfigValidationError(
            f"Unknown config key: {key}. Valid keys: {', '.join(CONFIGURABLE_KEYS)}",
            key=key,
        )


def config_get(key: str, start_dir: str | None = None) -> Any:
    """Effective value of ``key``, environment overrides included."""
    _check_key(key)
    settings = load_settings(start_dir=start_dir)
    return DigestfmtConfig(hash=settings.hash, logging=settings.logging).get(key)


def config_set(key: str, value: str, start_dir: str | None = None) -> tuple[Path, Any]:
    """
    Validate ``value`` for ``key`` and store it in the config file.

    Only what is already in the file is carried over; environment
    overrides stay out of the saved file.

    Returns:
        Tuple of (config path written, value after validation)

    Raises:
        ConfigValidationError: If the key is unknown or the value is invalid
        ConfigFileError: If the existing file is malformed or cannot be written
    """
    _check_key(key)

    config_path = get_config_path_for_write(start_dir)
    file_data = read_config_file(config_path) if config_path.exists() else {}

    try:
        config = DigestfmtConfig.from_dict(file_data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid configuration in {config_path}: {e.error_count()} error(s)"
        ) from e
    try:
        config.set(key, value)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid value for {key}: {e.errors()[0]['msg']}", key=key, value=value
        ) from e

    save_config(config.to_dict(), config_path)
    return config_path, config.get(key)


def config_list() -> dict[str, str]:
    """Configurable keys and their descriptions."""
    return CONFIGURABLE_KEYS
