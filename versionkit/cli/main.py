"""versionkit CLI"""

import click

from versionkit import __version__
from versionkit.cli.version import compare, default, parse, props, tag

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="versionkit")
@click.pass_context
def cli(ctx):
    """
    Parse, compare and render version strings.
    """
    ctx.ensure_object(dict)


cli.add_command(add_debug_option(parse))
cli.add_command(add_debug_option(compare))
cli.add_command(add_debug_option(default))
cli.add_command(add_debug_option(props))
cli.add_command(add_debug_option(tag))

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
