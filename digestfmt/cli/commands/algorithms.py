"""
The algorithms command.

Usage: digestfmt algorithms [--all]
"""

import click

from ..context import DigestfmtContext


@click.command("algorithms")
@click.option("--all", "show_all", is_flag=True, help="Include registered algorithms outside the standard list.")
@click.pass_obj
def algorithms(ctx: DigestfmtContext, show_all: bool) -> None:
    """Show digest algorithms and whether this platform provides them.

    The standard list is printed weakest first; the one marked
    'strongest' is what `digestfmt hash` uses without -a.
    """
    formatter = ctx.formatter
    registry = formatter.registry
    strongest = formatter.strongest_available()

    names = list(formatter.algorithms)
    if show_all:
        names += [n for n in registry.registered_algorithms if n not in names]

    width = max(len(n) for n in names)
    for name in names:
        strategy = registry.get(name)
        if strategy is None or not strategy.is_available():
            click.echo(f"  {name:<{width}}  unavailable")
            continue
        line = f"  {name:<{width}}  {strategy.digest_size * 2} hex chars"
        if name == strongest:
            line += "  (strongest)"
        click.echo(line)
