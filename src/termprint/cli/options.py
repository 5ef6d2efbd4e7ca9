# topmark:header:start
#
#   project      : Termprint
#   file         : options.py
#   file_relpath : src/termprint/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options (verbosity, color) and their resolution logic.

Commands and the group stay thin by reusing these decorators. Program-output
verbosity is controlled by ``-v``/``-q``; internal logging is controlled by
the ``TERMPRINT_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from termprint.cli.cli_types import EnumChoiceParam
from termprint.cli.errors import TermprintUsageError
from termprint.cli_shared.color import ColorMode

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        ``verbose_count`` when positive, ``-quiet_count`` when quiet, else 0.

    Raises:
        TermprintUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TermprintUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    return -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program output detail. Repeat for more.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Reduce program output (hide configuration warnings).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f
