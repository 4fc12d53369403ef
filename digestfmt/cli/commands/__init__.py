"""
Click command implementations for digestfmt CLI.

Commands are registered with the main CLI group via the
register_commands() function in digestfmt.cli.
"""

from .algorithms import algorithms
from .config import config
from .hash import hash_cmd, md5_cmd, sha1_cmd, sha512_cmd

COMMANDS = [
    algorithms,
    config,
    hash_cmd,
    md5_cmd,
    sha1_cmd,
    sha512_cmd,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "config",
    "hash_cmd",
    "md5_cmd",
    "sha1_cmd",
    "sha512_cmd",
]
