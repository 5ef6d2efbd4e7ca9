# topmark:header:start
#
#   project      : Termprint
#   file         : version.py
#   file_relpath : src/termprint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Termprint `version` command.

Prints the Termprint version installed in the active Python environment.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING

import click

from termprint.cli.cli_types import EnumChoiceParam
from termprint.constants import TERMPRINT_VERSION
from termprint.rendering.api import render_term
from termprint.rendering.backends import Backend
from termprint.term.builder import TermBuilder

if TYPE_CHECKING:
    from termprint.cli_shared.console_api import ConsoleLike


class VersionFormat(str, Enum):
    """Output formats of the `version` command."""

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"


@click.command(
    name="version",
    help="Show the current version of Termprint.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(VersionFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in VersionFormat)}).",
)
def version_command(*, output_format: VersionFormat | None = None) -> None:
    """Show the current version of Termprint.

    Args:
        output_format (VersionFormat | None): Output format; plain text by default.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    fmt: VersionFormat = output_format or VersionFormat.TEXT
    if fmt == VersionFormat.JSON:
        console.print(json.dumps({"version": TERMPRINT_VERSION}))
    elif fmt == VersionFormat.MARKDOWN:
        builder = TermBuilder()
        with builder.section("Termprint Version"):
            builder.append_field("version", TERMPRINT_VERSION)
        console.print(render_term(builder.finish(), Backend.MARKDOWN), nl=False)
    elif verbosity > 0:
        console.print(console.styled("Termprint version:", bold=True, underline=True))
        console.print(f"  {console.styled(TERMPRINT_VERSION, bold=True)}")
    else:
        console.print(console.styled(TERMPRINT_VERSION, bold=True))
