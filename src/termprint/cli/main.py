# topmark:header:start
#
#   project      : Termprint
#   file         : main.py
#   file_relpath : src/termprint/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Termprint command-line interface.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``verbosity_level``: program-output verbosity from ``-v``/``-q``.
- ``log_level``: internal logging level from ``TERMPRINT_LOG_LEVEL``.
- ``color_mode``: explicit `ColorMode` from ``--color``/``--no-color`` (or None).
- ``console``: the `ClickConsole` used for program output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termprint.cli.commands.render import render_command
from termprint.cli.commands.version import version_command
from termprint.cli.console import ClickConsole
from termprint.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from termprint.cli_shared.color import ColorMode, resolve_color_mode
from termprint.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from termprint.cli_shared.console_api import ConsoleLike
    from termprint.config.logging import TermprintLogger

logger: TermprintLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    override: ColorMode | None = ColorMode.NEVER if no_color else color_mode
    ctx.obj["color_mode"] = override
    enable_color: bool = resolve_color_mode(color_mode_override=override)
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: %s", {k: v for k, v in ctx.obj.items() if k != "console"})


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Termprint CLI: render tagged term documents for the terminal, Markdown or files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Termprint CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'termprint render DOCUMENT' to render a term document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

if __name__ == "__main__":
    cli()
