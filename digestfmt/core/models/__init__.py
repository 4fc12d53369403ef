"""Pydantic models for digestfmt configuration."""

from .config import ConfigBaseModel, DigestfmtConfig, HashConfig, LoggingConfig, LogLevel

__all__ = [
    "ConfigBaseModel",
    "DigestfmtConfig",
    "HashConfig",
    "LogLevel",
    "LoggingConfig",
]
