"""
Hash algorithm strategies and registry.

New algorithms are added by registering strategies; unregistered names
are resolved through hashlib at call time.
"""

from .registry import HashAlgorithmRegistry, hashlib_name_for
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

__all__ = [
    "Blake3Strategy",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "HashlibStrategy",
    "MD2Strategy",
    "MD5Strategy",
    "SHA1Strategy",
    "SHA256Strategy",
    "SHA384Strategy",
    "SHA512Strategy",
    "hashlib_name_for",
]
