"""
Hash algorithm registry.

Maps algorithm names to strategies. Lookups are case-insensitive, and names
that are not registered fall through to whatever hashlib offers at runtime,
so availability is always decided by the running interpreter.
"""

import hashlib
from typing import Any

from ..core.exceptions import HashUnavailableError
from .strategies import (
    Blake3Strategy,
    HashlibStrategy,
    HashStrategy,
    MD2Strategy,
    MD5Strategy,
    SHA1Strategy,
    SHA256Strategy,
    SHA384Strategy,
    SHA512Strategy,
)

DEFAULT_ALIASES: dict[str, str] = {
    "SHA": "SHA-1",
    "SHA1": "SHA-1",
}


def hashlib_name_for(algorithm: str) -> str:
    """
    Translate a dash-style algorithm name into hashlib's spelling.

    Examples:
        'SHA-224' -> 'sha224', 'SHA3-256' -> 'sha3_256',
        'SHA-512/256' -> 'sha512_256', 'BLAKE2b' -> 'blake2b'
    """
    name = algorithm.lower()
    if name.startswith("sha3-"):
        return "sha3_" + name[len("sha3-") :]
    if name.startswith("sha-512/"):
        return "sha512_" + name[len("sha-512/") :]
    if name.startswith("sha-"):
        return "sha" + name[len("sha-") :]
    return name.replace("-", "_")


class HashAlgorithmRegistry:
    """
    Registry for hash algorithm strategies.

    Example:
        registry = HashAlgorithmRegistry()

        digest = registry.compute_digest("SHA-256", b"abc")

        # Register custom algorithm
        registry.register(MyCustomStrategy())
        hasher = registry.create_hasher("my-custom")
    """

    def __init__(self, register_defaults: bool = True, dynamic_lookup: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register built-in algorithms
            dynamic_lookup: If True, resolve unregistered names through hashlib
        """
        self._strategies: dict[str, HashStrategy] = {}
        self._aliases: dict[str, str] = {}
        self._dynamic_lookup = dynamic_lookup
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms, weakest first."""
        self.register(MD2Strategy())
        self.register(MD5Strategy())
        self.register(SHA1Strategy())
        self.register(SHA256Strategy())
        self.register(SHA384Strategy())
        self.register(SHA512Strategy())
        self.register(Blake3Strategy())
        for alias, target in DEFAULT_ALIASES.items():
            self.add_alias(alias, target)

    def register(self, strategy: HashStrategy) -> None:
        """
        Register a hash strategy, replacing any strategy of the same name.

        Args:
            strategy: HashStrategy implementation
        """
        self._strategies[strategy.algorithm_name.upper()] = strategy

    def add_alias(self, alias: str, algorithm: str) -> None:
        """Make ``alias`` resolve to the registered ``algorithm``."""
        if algorithm.upper() not in self._strategies:
            raise ValueError(f"Cannot alias unregistered algorithm: {algorithm}")
        self._aliases[alias.upper()] = algorithm.upper()

    def get(self, algorithm: str) -> HashStrategy | None:
        """
        Get strategy by algorithm name.

        Args:
            algorithm: Algorithm name (e.g., 'SHA-256', 'md5', 'SHA3-512')

        Returns:
            HashStrategy or None if the name cannot be resolved
        """
        key = algorithm.upper()
        key = self._aliases.get(key, key)
        strategy = self._strategies.get(key)
        if strategy is None and self._dynamic_lookup:
            strategy = self._resolve_hashlib(algorithm)
        return strategy

    @staticmethod
    def _resolve_hashlib(algorithm: str) -> HashStrategy | None:
        """Build a strategy for a name hashlib knows, if it has a fixed digest size."""
        hashlib_name = hashlib_name_for(algorithm)
        if hashlib_name not in hashlib.algorithms_available:
            return None
        if hashlib_name.startswith("shake"):
            return None
        try:
            digest_size = hashlib.new(hashlib_name).digest_size
        except ValueError:
            return None
        return HashlibStrategy(algorithm.upper(), hashlib_name, digest_size)

    def create_hasher(self, algorithm: str) -> Any:
        """
        Create a hasher for the given algorithm.

        Args:
            algorithm: Algorithm name

        Returns:
            Hasher instance

        Raises:
            HashUnavailableError: If the algorithm is unknown or disabled
        """
        strategy = self.get(algorithm)
        if strategy is None:
            raise HashUnavailableError(f"Unknown hash algorithm: {algorithm}", algorithm=algorithm)
        try:
            return strategy.create_hasher()
        except (ValueError, ImportError) as e:
            raise HashUnavailableError(
                f"Hash algorithm not available: {algorithm}", algorithm=algorithm
            ) from e

    def compute_digest(self, algorithm: str, data: bytes) -> bytes:
        """
        Compute the raw digest of data using the specified algorithm.

        Args:
            algorithm: Algorithm name
            data: Data to hash

        Returns:
            Digest bytes

        Raises:
            HashUnavailableError: If the algorithm is unknown or disabled
        """
        strategy = self.get(algorithm)
        if strategy is None:
            raise HashUnavailableError(f"Unknown hash algorithm: {algorithm}", algorithm=algorithm)

        hasher = self.create_hasher(algorithm)
        strategy.update(hasher, data)
        return strategy.digest(hasher)

    def is_available(self, algorithm: str) -> bool:
        """Check if algorithm resolves and can be instantiated right now."""
        strategy = self.get(algorithm)
        return strategy is not None and strategy.is_available()

    @property
    def registered_algorithms(self) -> list[str]:
        """List registered algorithm names in registration order."""
        return [s.algorithm_name for s in self._strategies.values()]

    @property
    def available_algorithms(self) -> list[str]:
        """List registered algorithm names this interpreter can compute."""
        return [s.algorithm_name for s in self._strategies.values() if s.is_available()]

    def __contains__(self, algorithm: str) -> bool:
        """Check if algorithm name resolves to a strategy."""
        return self.get(algorithm) is not None
