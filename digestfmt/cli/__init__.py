"""Command-line interface: ``digestfmt <command>``."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import click

from ..core.exceptions import ConfigError
from .context import DigestfmtContext

try:
    __version__ = version("digestfmt")
except PackageNotFoundError:
    __version__ = "0.1.0"

# Commands that must run even when the stored configuration is broken.
_NO_CONTEXT = {"config"}


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="digestfmt")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """digestfmt - lowercase hex digests of text

    \b
    Hashing:
        digestfmt hash TEXT            Strongest available algorithm
        digestfmt hash -a MD5 TEXT     Named algorithm
        digestfmt md5|sha1|sha512 TEXT Fixed-algorithm shortcuts

    \b
    Information:
        digestfmt algorithms           Show algorithm availability

    \b
    Configuration:
        digestfmt config               View or set configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return
    if ctx.invoked_subcommand in _NO_CONTEXT:
        return
    try:
        ctx.obj = DigestfmtContext.create()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def register_commands() -> None:
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()

__all__ = ["DigestfmtContext", "__version__", "cli"]
