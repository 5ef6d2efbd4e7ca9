# topmark:header:start
#
#   project      : Termprint
#   file         : backends.py
#   file_relpath : src/termprint/rendering/backends.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering backends and their capability descriptor.

The set of backends is closed: adding one means adding a `Backend` member
and a rule entry in [`termprint.rendering.engine`][termprint.rendering.engine],
not subclassing a renderer.
"""

from __future__ import annotations

from dataclasses import dataclass

from termprint.constants import MAX_HEADING_LEVEL
from termprint.core.enum_mixins import KeyedStrEnum


class Backend(KeyedStrEnum):
    """Output targets a term can be rendered for.

    Attributes:
        TERMINAL: Interactive terminal; ANSI styling when color is enabled.
        MARKDOWN: Markdown document; styling as inline markup.
        FILE: Plain text for files and non-interactive consumers; no styling.
    """

    TERMINAL = ("terminal", "Interactive terminal", ("term", "tty"))
    MARKDOWN = ("markdown", "Markdown document", ("md",))
    FILE = ("file", "Plain text file", ("plain", "text"))


@dataclass(frozen=True, slots=True)
class Capabilities:
    """What a backend may express for one render call.

    Detecting these (e.g. "is stdout a TTY") is the caller's job; see
    [`resolve_color_mode`][termprint.cli_shared.color.resolve_color_mode].

    Attributes:
        color (bool): Emit ANSI escape sequences (Terminal only).
        max_heading_level (int): Deepest Markdown heading level; deeper
            sections reuse it. Clamped to 1..6.
        allow_empty (bool): Render an empty term as ``""``. When False,
            rendering an empty term raises `EmptyTermError`.
    """

    color: bool = False
    max_heading_level: int = MAX_HEADING_LEVEL
    allow_empty: bool = True

    def __post_init__(self) -> None:
        clamped: int = min(max(int(self.max_heading_level), 1), MAX_HEADING_LEVEL)
        if clamped != self.max_heading_level:
            object.__setattr__(self, "max_heading_level", clamped)
