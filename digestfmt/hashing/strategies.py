"""
Hash algorithm strategy implementations.

Each strategy encapsulates the logic for a specific digest algorithm,
following the Strategy pattern for extensibility. Algorithm names use the
upper-case, dash-separated spelling ("SHA-256"), not hashlib's ("sha256").
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Any

try:
    import blake3 as _blake3

    blake3: Any | None = _blake3
except ImportError:
    blake3 = None


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm_name: Unique identifier for the algorithm
    - digest_size: Length of the digest in bytes
    - create_hasher(): Factory method for hasher instances
    """

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return algorithm identifier (e.g., 'SHA-256', 'MD5')."""
        pass

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Return the digest length in bytes."""
        pass

    @abstractmethod
    def create_hasher(self) -> Any:
        """Create a new hasher instance."""
        pass

    def update(self, hasher: Any, data: bytes) -> None:
        """Update hasher with data. Default implementation works for most hashers."""
        hasher.update(data)

    def digest(self, hasher: Any) -> bytes:
        """Get raw digest bytes from hasher."""
        return hasher.digest()

    def is_available(self) -> bool:
        """Whether the running interpreter can provide this algorithm."""
        try:
            self.create_hasher()
        except (ValueError, ImportError):
            return False
        return True


class HashlibStrategy(HashStrategy):
    """Any fixed-length algorithm exposed through hashlib.new()."""

    def __init__(self, algorithm_name: str, hashlib_name: str, digest_size: int) -> None:
        self._algorithm_name = algorithm_name
        self._hashlib_name = hashlib_name
        self._digest_size = digest_size

    @property
    def algorithm_name(self) -> str:
        return self._algorithm_name

    @property
    def digest_size(self) -> int:
        return self._digest_size

    @property
    def hashlib_name(self) -> str:
        return self._hashlib_name

    def create_hasher(self) -> Any:
        return hashlib.new(self._hashlib_name)


class MD2Strategy(HashStrategy):
    """MD2 - obsolete, absent from most OpenSSL builds."""

    @property
    def algorithm_name(self) -> str:
        return "MD2"

    @property
    def digest_size(self) -> int:
        return 16

    def create_hasher(self) -> Any:
        return hashlib.new("md2")


class MD5Strategy(HashStrategy):
    """MD5 hashing strategy - for legacy compatibility only."""

    @property
    def algorithm_name(self) -> str:
        return "MD5"

    @property
    def digest_size(self) -> int:
        return 16

    def create_hasher(self) -> Any:
        return hashlib.md5()


class SHA1Strategy(HashStrategy):
    """SHA-1 hashing strategy."""

    @property
    def algorithm_name(self) -> str:
        return "SHA-1"

    @property
    def digest_size(self) -> int:
        return 20

    def create_hasher(self) -> Any:
        return hashlib.sha1()


class SHA256Strategy(HashStrategy):
    """SHA-256 hashing strategy - widely compatible."""

    @property
    def algorithm_name(self) -> str:
        return "SHA-256"

    @property
    def digest_size(self) -> int:
        return 32

    def create_hasher(self) -> Any:
        return hashlib.sha256()


class SHA384Strategy(HashStrategy):
    """SHA-384 hashing strategy - truncated SHA-512."""

    @property
    def algorithm_name(self) -> str:
        return "SHA-384"

    @property
    def digest_size(self) -> int:
        return 48

    def create_hasher(self) -> Any:
        return hashlib.sha384()


class SHA512Strategy(HashStrategy):
    """SHA-512 hashing strategy - stronger variant of SHA-2."""

    @property
    def algorithm_name(self) -> str:
        return "SHA-512"

    @property
    def digest_size(self) -> int:
        return 64

    def create_hasher(self) -> Any:
        return hashlib.sha512()


class Blake3Strategy(HashStrategy):
    """BLAKE3 hashing strategy - requires the blake3 package."""

    @property
    def algorithm_name(self) -> str:
        return "BLAKE3"

    @property
    def digest_size(self) -> int:
        return 32

    def create_hasher(self) -> Any:
        if blake3 is None:
            raise ImportError("blake3 package not installed")
        return blake3.blake3()
