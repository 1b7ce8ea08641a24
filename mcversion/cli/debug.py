from functools import wraps

import click

from .utils.logging import configure_logging

_DEBUG_FLAG = "--debug/--no-debug"


def add_debug_option(cmd):
    """Decorator adding a --debug/--no-debug flag to a command, group or function"""
    if isinstance(cmd, click.Command):
        if not any(param.name == "debug" for param in cmd.params):
            cmd.params.insert(
                0,
                click.Option(
                    [_DEBUG_FLAG],
                    is_eager=True,
                    expose_value=False,
                    callback=_set_debug,
                    help="Enable debug logging",
                ),
            )
        return cmd

    @click.option(
        _DEBUG_FLAG,
        is_eager=True,
        expose_value=False,
        callback=_set_debug,
        help="Enable debug logging",
    )
    @wraps(cmd)
    def wrapper(*args, **kwargs):
        return cmd(*args, **kwargs)

    return wrapper


def _set_debug(ctx, param, value: bool):
    """Record the debug flag on the root context and reconfigure logging"""
    root_ctx = ctx.find_root()
    root_ctx.ensure_object(dict)

    # A nested --no-debug must not undo a --debug given higher up
    if value or "DEBUG" not in root_ctx.obj or ctx is root_ctx:
        root_ctx.obj["DEBUG"] = value

    configure_logging(root_ctx.obj["DEBUG"])
    return root_ctx.obj["DEBUG"]
