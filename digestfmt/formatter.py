"""
Hex digests of text strings.

Text is encoded as ISO-8859-1 before hashing. Code points above 255 cannot
be represented and become '?' (0x3F); existing digests depend on this, so
the encoding must not be switched to UTF-8.
"""

from __future__ import annotations

import logging
from typing import Final

from .core.exceptions import HashUnavailableError
from .hashing import HashAlgorithmRegistry

# Weakest to strongest; smart_hash walks this in reverse.
ALGORITHMS: Final[tuple[str, ...]] = ("MD2", "MD5", "SHA-1", "SHA-256", "SHA-384", "SHA-512")

TEXT_ENCODING: Final = "iso-8859-1"

logger = logging.getLogger(__name__)


def encode_text(text: str) -> bytes:
    """Encode text as Latin-1, replacing unrepresentable characters with '?'."""
    return text.encode(TEXT_ENCODING, errors="replace")


def to_hex(digest: bytes) -> str:
    """Render digest bytes as lowercase hex, two characters per byte."""
    return digest.hex()


class HashFormatter:
    """
    Computes lowercase hex digests of text with named algorithms.

    ``hash`` and ``smart_hash`` return None when no digest can be produced;
    ``digest`` is the strict variant that raises HashUnavailableError.
    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(
        self,
        registry: HashAlgorithmRegistry | None = None,
        log: logging.Logger | None = None,
        algorithms: tuple[str, ...] = ALGORITHMS,
    ) -> None:
        """
        Args:
            registry: Algorithm registry (a fresh default registry if omitted)
            log: Diagnostic logger (this module's logger if omitted)
            algorithms: Candidates for smart_hash, weakest first
        """
        self._registry = registry if registry is not None else HashAlgorithmRegistry()
        self._log = log or logger
        self._algorithms = tuple(algorithms)

    @property
    def registry(self) -> HashAlgorithmRegistry:
        return self._registry

    @property
    def algorithms(self) -> tuple[str, ...]:
        return self._algorithms

    def digest(self, text: str, algorithm: str) -> str:
        """
        Hash ``text`` with ``algorithm`` and return the hex digest.

        Raises:
            HashUnavailableError: If the algorithm is unknown or disabled,
                or the text cannot be encoded
        """
        if not isinstance(algorithm, str):
            raise HashUnavailableError(
                f"Algorithm name must be a string, got {type(algorithm).__name__}",
                algorithm=repr(algorithm),
            )
        try:
            data = encode_text(text)
        except (AttributeError, UnicodeError) as e:
            raise HashUnavailableError("Text could not be encoded", algorithm=algorithm) from e
        return to_hex(self._registry.compute_digest(algorithm, data))

    def hash(self, text: str, algorithm: str) -> str | None:
        """Hash ``text`` with ``algorithm``; None if no digest can be produced."""
        try:
            return self.digest(text, algorithm)
        except HashUnavailableError as e:
            self._log.debug("No %s digest: %s", algorithm, e)
            return None

    def smart_hash(self, text: str) -> str | None:
        """
        Hash with the strongest algorithm this platform supports.

        Digest length depends on which algorithm wins, so use ``hash`` when
        the output length matters.
        """
        for algorithm in reversed(self._algorithms):
            result = self.hash(text, algorithm)
            if result is not None:
                return result
            self._log.debug("Falling back from %s", algorithm)
        self._log.debug("No digest algorithm available among %s", ", ".join(self._algorithms))
        return None

    def strongest_available(self) -> str | None:
        """Name of the algorithm smart_hash would use, or None."""
        for algorithm in reversed(self._algorithms):
            if self._registry.is_available(algorithm):
                return algorithm
        return None

    def md5(self, text: str) -> str | None:
        """MD5 hex digest of ``text``, or None."""
        return self.hash(text, "MD5")

    def sha1(self, text: str) -> str | None:
        """SHA-1 hex digest of ``text``, or None."""
        return self.hash(text, "SHA-1")

    def sha512(self, text: str) -> str | None:
        """SHA-512 hex digest of ``text``, or None."""
        return self.hash(text, "SHA-512")


_default_formatter: HashFormatter | None = None


def get_formatter() -> HashFormatter:
    """Shared formatter used by the module-level helpers."""
    global _default_formatter
    if _default_formatter is None:
        _default_formatter = HashFormatter()
    return _default_formatter


def hash_text(text: str, algorithm: str) -> str | None:
    """Hex digest of ``text`` with ``algorithm`` using the shared formatter, or None."""
    return get_formatter().hash(text, algorithm)


def smart_hash(text: str) -> str | None:
    """Hex digest of ``text`` with the strongest available algorithm, or None."""
    return get_formatter().smart_hash(text)


def md5(text: str) -> str | None:
    """MD5 hex digest of ``text``, or None."""
    return get_formatter().md5(text)


def sha1(text: str) -> str | None:
    """SHA-1 hex digest of ``text``, or None."""
    return get_formatter().sha1(text)


def sha512(text: str) -> str | None:
    """SHA-512 hex digest of ``text``, or None."""
    return get_formatter().sha512(text)
