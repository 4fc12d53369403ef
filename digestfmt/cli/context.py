"""State shared by CLI commands through ``ctx.obj``."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.settings import DigestfmtSettings, load_settings
from ..formatter import HashFormatter
from ..hashing import HashAlgorithmRegistry
from ..services.logging import configure_logging


@dataclass
class DigestfmtContext:
    settings: DigestfmtSettings
    formatter: HashFormatter

    @classmethod
    def create(cls, start_dir: str | None = None) -> DigestfmtContext:
        """
        Load settings, set up logging and build the formatter.

        Raises:
            ConfigError: If the configuration cannot be read or is invalid
        """
        settings = load_settings(start_dir=start_dir)
        log = configure_logging(settings.logging)
        formatter = HashFormatter(
            registry=HashAlgorithmRegistry(),
            log=log.getChild("formatter"),
        )
        return cls(settings=settings, formatter=formatter)
