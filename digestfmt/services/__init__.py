"""Runtime services wired up by the CLI."""

from .logging import configure_logging

__all__ = ["configure_logging"]
