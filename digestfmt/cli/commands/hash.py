"""
The hash, md5, sha1 and sha512 commands.

Usage:
    digestfmt hash [-a ALGORITHM] [TEXT]
    digestfmt md5|sha1|sha512 [TEXT]
"""

from __future__ import annotations

import click

from ...core.exceptions import HashUnavailableError
from ..context import DigestfmtContext


def _read_text(text: str | None) -> str:
    """
    Return TEXT, or all of stdin when TEXT is omitted or '-'.

    Stdin is decoded as UTF-8 when it is valid UTF-8 and as Latin-1
    otherwise, so raw Latin-1 bytes hash as themselves.
    """
    if text is not None and text != "-":
        return text
    raw = click.get_binary_stream("stdin").read()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def _digest_or_fail(ctx: DigestfmtContext, text: str, algorithm: str) -> str:
    try:
        return ctx.formatter.digest(text, algorithm)
    except HashUnavailableError as e:
        raise click.ClickException(str(e)) from e


@click.command("hash")
@click.argument("text", required=False)
@click.option(
    "-a",
    "--algorithm",
    default=None,
    help="Digest algorithm (e.g. MD5, SHA-256). Defaults to hash.default, "
    "or the strongest available algorithm.",
)
@click.option("--show-algorithm", is_flag=True, help="Prefix the digest with the algorithm name.")
@click.pass_obj
def hash_cmd(ctx: DigestfmtContext, text: str | None, algorithm: str | None, show_algorithm: bool) -> None:
    """Print the hex digest of TEXT.

    TEXT is encoded as ISO-8859-1 before hashing; characters outside
    Latin-1 are hashed as '?'. Reads stdin when TEXT is omitted or '-'.

    \b
    Examples:

        digestfmt hash "hello"            # strongest available

        digestfmt hash -a SHA-256 hello   # named algorithm

        echo -n hello | digestfmt hash -a MD5
    """
    data = _read_text(text)
    algorithm = algorithm or ctx.settings.hash.default

    if algorithm is None:
        algorithm = ctx.formatter.strongest_available()
        if algorithm is None:
            raise click.ClickException("No digest algorithm available")

    digest = _digest_or_fail(ctx, data, algorithm)
    click.echo(f"{algorithm}:{digest}" if show_algorithm else digest)


def _fixed_algorithm_command(name: str, algorithm: str) -> click.Command:
    """Build a shortcut command bound to one algorithm."""

    @click.command(name, help=f"Print the {algorithm} hex digest of TEXT (stdin if omitted).")
    @click.argument("text", required=False)
    @click.pass_obj
    def command(ctx: DigestfmtContext, text: str | None) -> None:
        click.echo(_digest_or_fail(ctx, _read_text(text), algorithm))

    return command


md5_cmd = _fixed_algorithm_command("md5", "MD5")
sha1_cmd = _fixed_algorithm_command("sha1", "SHA-1")
sha512_cmd = _fixed_algorithm_command("sha512", "SHA-512")
