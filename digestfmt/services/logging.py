"""
Handler setup for the ``digestfmt`` logger hierarchy.

Library code only ever calls ``logging.getLogger(__name__)``; the CLI calls
``configure_logging`` once per invocation to decide where records go.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..core.models import LoggingConfig

LOGGER_NAME = "digestfmt"
LOG_FILE_PATH = Path.home() / ".digestfmt" / "digestfmt.log"
MAX_FILE_SIZE = 10 * 1024 * 1024
BACKUP_COUNT = 3

_FORMAT = logging.Formatter(
    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def configure_logging(config: LoggingConfig, log_file: Path | None = None) -> logging.Logger:
    """
    Attach stderr and/or rotating-file handlers to the ``digestfmt`` logger.

    Any handlers from an earlier call are removed first, so calling this
    twice never duplicates output. With both outputs disabled the logger
    gets a NullHandler and stays quiet.
    """
    log = logging.getLogger(LOGGER_NAME)
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    log.propagate = False
    log.setLevel(config.level.upper())

    if config.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(_FORMAT)
        log.addHandler(console)

    if config.file:
        path = log_file or LOG_FILE_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        rotating = RotatingFileHandler(path, maxBytes=MAX_FILE_SIZE, backupCount=BACKUP_COUNT)
        rotating.setFormatter(_FORMAT)
        log.addHandler(rotating)

    if not log.handlers:
        log.addHandler(logging.NullHandler())
    return log
