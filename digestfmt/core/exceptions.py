"""
Errors raised by digestfmt.

Hashing has exactly one failure mode, HashUnavailableError. Everything
else is about reading or writing configuration.
"""

from __future__ import annotations


class DigestfmtError(Exception):
    """Root of the digestfmt error tree.

    ``context`` carries the values worth showing next to the message
    (algorithm name, offending key, file path).
    """

    def __init__(self, message: str, **context: object) -> None:
        super().__init__(message)
        self.message = message
        self.context = {k: v for k, v in context.items() if v is not None}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class HashUnavailableError(DigestfmtError, ValueError):
    """No digest could be produced: unknown or disabled algorithm, or unencodable text."""

    def __init__(self, message: str, *, algorithm: str | None = None) -> None:
        super().__init__(message, algorithm=algorithm)
        self.algorithm = algorithm


class ConfigError(DigestfmtError):
    """Configuration could not be loaded or saved."""


class ConfigFileError(ConfigError):
    """A config file is unreadable, malformed TOML, or unwritable."""

    def __init__(self, message: str, *, file_path: str | None = None) -> None:
        super().__init__(message, file_path=file_path)


class ConfigValidationError(ConfigError, ValueError):
    """A config key is unknown or its value does not validate."""

    def __init__(self, message: str, *, key: str | None = None, value: object = None, **context: object) -> None:
        super().__init__(message, key=key, value=value, **context)
