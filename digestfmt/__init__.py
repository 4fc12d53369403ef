"""
digestfmt - lowercase hex digests of text strings.

Usage:
    from digestfmt import md5, smart_hash

    md5("abc")         # '900150983cd24fb0d6963f7d28e17f72'
    smart_hash("abc")  # SHA-512 where available
"""

from .core.exceptions import HashUnavailableError
from .formatter import (
    ALGORITHMS,
    TEXT_ENCODING,
    HashFormatter,
    encode_text,
    get_formatter,
    hash_text,
    md5,
    sha1,
    sha512,
    smart_hash,
    to_hex,
)

__all__ = [
    "ALGORITHMS",
    "TEXT_ENCODING",
    "HashFormatter",
    "HashUnavailableError",
    "encode_text",
    "get_formatter",
    "hash_text",
    "md5",
    "sha1",
    "sha512",
    "smart_hash",
    "to_hex",
]
