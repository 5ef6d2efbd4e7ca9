# topmark:header:start
#
#   project      : Termprint
#   file         : render.py
#   file_relpath : src/termprint/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Termprint `render` command.

Loads a term document stored as JSON (see `termprint.term.serializers`),
renders it for the selected backend and writes the result to stdout or to
``--output``.

Settings are layered: built-in defaults, then the nearest ``termprint.toml``
or ``[tool.termprint]`` table (or ``--config``), then command-line options.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from termprint.cli.cli_types import EnumChoiceParam
from termprint.cli.errors import TermprintDataError, error_for_os_error
from termprint.config.io import extract_tool_table, load_toml_dict
from termprint.config.logging import get_logger
from termprint.config.model import MutablePrinterConfig
from termprint.constants import MAX_HEADING_LEVEL
from termprint.core.diagnostics import DiagnosticLevel
from termprint.rendering.backends import Backend
from termprint.rendering.sinks import FileSink, StreamSink, emit
from termprint.term.errors import EmptyTermError
from termprint.term.serializers import term_from_dict

if TYPE_CHECKING:
    from termprint.cli_shared.color import ColorMode
    from termprint.cli_shared.console_api import ConsoleLike
    from termprint.config.logging import TermprintLogger
    from termprint.config.model import PrinterConfig
    from termprint.rendering.api import Renderer
    from termprint.term.nodes import Term

logger: TermprintLogger = get_logger(__name__)


def _read_document(document: str) -> Any:
    """Read and decode the JSON document named by ``document`` (``-`` is stdin)."""
    if document == "-":
        text: str = click.get_text_stream("stdin").read()
        source: str = "<stdin>"
    else:
        path = Path(document)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise error_for_os_error(exc, path) from exc
        source = str(path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise TermprintDataError(f"Invalid JSON in {source}: {exc}") from exc


def _load_config(
    *,
    config_file: Path | None,
    no_config: bool,
    backend: Backend | None,
    color_mode: ColorMode | None,
    max_heading_level: int | None,
    strict: bool,
) -> PrinterConfig:
    draft: MutablePrinterConfig
    if no_config:
        draft = MutablePrinterConfig.from_defaults()
    elif config_file is not None:
        draft = MutablePrinterConfig.from_defaults()
        table: dict[str, Any] | None = extract_tool_table(config_file, load_toml_dict(config_file))
        if table is None:
            draft.diagnostics.add_warning(f"No [tool.termprint] table in {config_file}")
        else:
            draft.apply_toml(table, config_file=config_file)
    else:
        draft = MutablePrinterConfig.load()
    draft.apply_overrides(
        backend=backend,
        color=color_mode,
        max_heading_level=max_heading_level,
    )
    if strict:
        draft.allow_empty = False
    return draft.freeze()


def _report_diagnostics(console: ConsoleLike, config: PrinterConfig, verbosity: int) -> None:
    if verbosity < 0:
        return
    for diag in config.diagnostics:
        if diag.level is DiagnosticLevel.INFO and verbosity < 1:
            continue
        console.diagnostic(diag)


@click.command(
    name="render",
    help="Render a JSON term document ('-' reads from stdin).",
)
@click.argument("document", type=str)
@click.option(
    "--backend",
    "-b",
    "backend",
    type=EnumChoiceParam(Backend),
    default=None,
    help=f"Output backend ({', '.join(Backend.keys())}). Defaults to the configured one.",
)
@click.option(
    "--output",
    "-o",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the rendered text to this file instead of stdout.",
)
@click.option(
    "--max-heading-level",
    type=click.IntRange(1, MAX_HEADING_LEVEL),
    default=None,
    help="Deepest Markdown heading level; deeper sections reuse it.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail when the document has no nodes instead of printing nothing.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of discovering one.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Ignore configuration files.",
)
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    document: str,
    backend: Backend | None,
    output: Path | None,
    max_heading_level: int | None,
    strict: bool,
    config_file: Path | None,
    no_config: bool,
) -> None:
    """Render a term document.

    Args:
        ctx (click.Context): Click context holding the shared CLI state.
        document (str): Path of the JSON document, or ``-`` for stdin.
        backend (Backend | None): Backend override.
        output (Path | None): Destination file; stdout when omitted.
        max_heading_level (int | None): Markdown heading cap override.
        strict (bool): Treat an empty document as an error.
        config_file (Path | None): Explicit configuration file.
        no_config (bool): Skip configuration discovery.
    """
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    config: PrinterConfig = _load_config(
        config_file=config_file,
        no_config=no_config,
        backend=backend,
        color_mode=ctx.obj.get("color_mode"),
        max_heading_level=max_heading_level,
        strict=strict,
    )
    _report_diagnostics(console, config, verbosity)

    try:
        term: Term = term_from_dict(_read_document(document))
    except ValueError as exc:
        raise TermprintDataError(f"Invalid term document: {exc}") from exc

    renderer: Renderer = config.renderer(stdout_isatty=False if output else None)
    logger.debug("Rendering with %s", renderer)

    if term.is_empty and not renderer.capabilities.allow_empty:
        raise TermprintDataError(str(EmptyTermError()))

    if output is None:
        emit(term, renderer, StreamSink(sys.stdout))
        return
    try:
        with FileSink(output) as sink:
            written: int = emit(term, renderer, sink)
    except OSError as exc:
        raise error_for_os_error(exc, output) from exc
    if verbosity > 0:
        console.print(f"Wrote {written} character(s) to {output}")
