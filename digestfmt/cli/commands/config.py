"""``digestfmt config list|get|set``."""

from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from ...config import config_get, config_list, config_set
from ...core.exceptions import ConfigError


def _config_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Report ConfigError as a one-line CLI error instead of a traceback."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ConfigError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View or change settings stored in .digestfmt/config.toml.

    \b
        digestfmt config list
        digestfmt config get hash.default
        digestfmt config set hash.default SHA-256
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
def config_list_cmd() -> None:
    """Show every key that can be set."""
    keys = config_list()
    width = max(len(k) for k in keys)
    for key, description in keys.items():
        click.echo(f"  {key:<{width}}  {description}")


@config.command("get")
@click.argument("key")
@_config_errors
def config_get_cmd(key: str) -> None:
    """Print the effective value of KEY."""
    value = config_get(key)
    click.echo(f"{key}: {'(not set)' if value is None else value}")


@config.command("set")
@click.argument("key")
@click.argument("value")
@_config_errors
def config_set_cmd(key: str, value: str) -> None:
    """Store VALUE for KEY ('none' clears hash.default)."""
    path, stored = config_set(key, value)
    click.echo(f"Set {key} = {stored}")
    click.echo(f"Saved to {path}")
