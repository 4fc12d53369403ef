"""
Configuration models.

Both the TOML file and ``digestfmt config set`` go through these models,
so a value that loads is a value that can be saved and vice versa.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...hashing.registry import HashAlgorithmRegistry

LogLevel = Literal["debug", "info", "warning", "error"]

_UNSET = ("", "none", "null")


class ConfigBaseModel(BaseModel):
    """Config sections coerce TOML, env and CLI strings and ignore unknown keys."""

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="ignore",
        str_strip_whitespace=True,
    )


class HashConfig(ConfigBaseModel):
    """``[hash]`` section.

    ``default`` is the algorithm the CLI uses when none is given on the
    command line. None selects the strongest available algorithm.
    """

    default: str | None = None

    @field_validator("default", mode="before")
    @classmethod
    def known_algorithm(cls, v: Any) -> str | None:
        if v is None:
            return None
        if not isinstance(v, str):
            raise ValueError("must be an algorithm name")
        v = v.strip()
        if v.lower() in _UNSET:
            return None
        if v not in HashAlgorithmRegistry():
            raise ValueError(f"unknown hash algorithm {v!r}")
        return v


class LoggingConfig(ConfigBaseModel):
    """``[logging]`` section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def lower_level(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v


class DigestfmtConfig(ConfigBaseModel):
    """Complete digestfmt configuration, addressable by dotted keys."""

    hash: HashConfig = Field(default_factory=HashConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def _section(self, key: str) -> tuple[ConfigBaseModel, str]:
        section, _, field = key.partition(".")
        if section not in type(self).model_fields or not field:
            raise KeyError(key)
        model = getattr(self, section)
        if field not in type(model).model_fields:
            raise KeyError(key)
        return model, field

    def get(self, key: str, default: Any = None) -> Any:
        """Value at a dotted key such as ``logging.level``, or ``default``."""
        try:
            model, field = self._section(key)
        except KeyError:
            return default
        return getattr(model, field)

    def set(self, key: str, value: Any) -> None:
        """
        Assign and validate the value at a dotted key.

        Raises:
            KeyError: If the key does not name a config field
            pydantic.ValidationError: If the value does not validate
        """
        model, field = self._section(key)
        setattr(model, field, value)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DigestfmtConfig:
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
