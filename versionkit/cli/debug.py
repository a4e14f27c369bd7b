"""The ``--debug`` flag shared by the versionkit group and its commands."""

import click

from .utils.logging import configure_logging

DEBUG_KEY = "versionkit.debug"


def add_debug_option(cmd: click.Command) -> click.Command:
    """Attach a ``--debug/--no-debug`` option to a command or group."""
    if any(param.name == "debug" for param in cmd.params):
        return cmd

    cmd.params.insert(
        0,
        click.Option(
            ["--debug/--no-debug"],
            is_eager=True,
            expose_value=False,
            callback=_debug_callback,
            help="Log debug messages.",
        ),
    )
    return cmd


def _debug_callback(ctx: click.Context, param: click.Parameter, value: bool) -> bool:
    # ctx.meta is shared by nested contexts; commands may only turn debug on
    if value or ctx.parent is None:
        ctx.meta[DEBUG_KEY] = value

    debug = ctx.meta.get(DEBUG_KEY, False)
    configure_logging(debug)
    return debug
