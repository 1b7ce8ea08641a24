"""mcversion CLI"""

import click

from mcversion import __version__
from mcversion.cli.versions import (
    compare,
    generations,
    known,
    parse,
    resolve,
    runtime,
)

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="mcversion")
@click.pass_context
def cli(ctx):
    """
    Resolve Minecraft versions to generations of server internals.
    """
    ctx.ensure_object(dict)


cli.add_command(add_debug_option(parse))
cli.add_command(add_debug_option(compare))
cli.add_command(add_debug_option(resolve))
cli.add_command(add_debug_option(known))
cli.add_command(add_debug_option(generations))
cli.add_command(add_debug_option(runtime))

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
