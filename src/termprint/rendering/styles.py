# topmark:header:start
#
#   project      : Termprint
#   file         : styles.py
#   file_relpath : src/termprint/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style degradation tables.

Each backend maps the abstract [`Style`][termprint.term.nodes.Style] to its
own markup through one explicit table. A style missing from a backend's
table has no equivalent there and degrades to the bare text.

- Terminal: keyword arguments for `click.style()` (ANSI escape sequences),
  applied only when the renderer's capabilities declare color support.
- Markdown: opening and closing markup. Colors, dimming and underlining have
  no Markdown form and are dropped.
- File: no table; styling is always dropped.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, TypedDict

import click

from termprint.rendering.formatting import code_span
from termprint.term.nodes import Style

if TYPE_CHECKING:
    from collections.abc import Mapping


class StyleKwargs(TypedDict, total=False):
    """Keyword arguments accepted by click.style()."""

    fg: str
    bg: str
    bold: bool
    dim: bool
    italic: bool
    underline: bool
    strikethrough: bool


TERMINAL_STYLES: Mapping[Style, StyleKwargs] = MappingProxyType(
    {
        Style.BOLD: {"bold": True},
        Style.ITALIC: {"italic": True},
        Style.DIM: {"dim": True},
        Style.UNDERLINE: {"underline": True},
        Style.STRIKETHROUGH: {"strikethrough": True},
        Style.CODE: {"fg": "cyan"},
        Style.RED: {"fg": "red"},
        Style.GREEN: {"fg": "green"},
        Style.YELLOW: {"fg": "yellow"},
        Style.BLUE: {"fg": "blue"},
        Style.MAGENTA: {"fg": "magenta"},
        Style.CYAN: {"fg": "cyan"},
        Style.WHITE: {"fg": "white"},
    }
)

MARKDOWN_STYLES: Mapping[Style, tuple[str, str]] = MappingProxyType(
    {
        Style.BOLD: ("**", "**"),
        Style.ITALIC: ("*", "*"),
        Style.STRIKETHROUGH: ("~~", "~~"),
    }
)


def style_terminal(style: Style, text: str, *, color: bool) -> str:
    """Apply ``style`` to ``text`` for a terminal.

    Args:
        style (Style): Requested style.
        text (str): Text to decorate.
        color (bool): Whether ANSI escape sequences may be emitted.

    Returns:
        str: The decorated text, or ``text`` unchanged when color is off or
        the text is empty.
    """
    if not color or not text:
        return text
    kwargs: StyleKwargs = TERMINAL_STYLES.get(style, {})
    if not kwargs:
        return text
    return click.style(text, **kwargs)


def style_markdown(style: Style, text: str) -> str:
    """Apply ``style`` to ``text`` as Markdown inline markup."""
    if not text:
        return text
    if style is Style.CODE:
        return code_span(text)
    markup: tuple[str, str] | None = MARKDOWN_STYLES.get(style)
    if markup is None:
        return text
    opening, closing = markup
    return f"{opening}{text}{closing}"


def style_plain(style: Style, text: str) -> str:  # pylint: disable=unused-argument
    """File backend: styling is always dropped."""
    return text
