"""Errors, config models and settings loading."""

from .exceptions import (
    ConfigError,
    ConfigFileError,
    ConfigValidationError,
    DigestfmtError,
    HashUnavailableError,
)

__all__ = [
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
    "DigestfmtError",
    "HashUnavailableError",
]
