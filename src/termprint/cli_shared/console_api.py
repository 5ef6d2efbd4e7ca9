# topmark:header:start
#
#   project      : Termprint
#   file         : console_api.py
#   file_relpath : src/termprint/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output surface shared by the Termprint commands.

Rendered terms and plain messages go to stdout. Configuration diagnostics
and errors go to stderr, so a rendered document piped elsewhere stays clean.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from termprint.core.diagnostics import Diagnostic


class ConsoleLike(Protocol):
    """What `render` and `version` need from a console."""

    enable_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout."""
        ...

    def diagnostic(self, diag: Diagnostic) -> None:
        """Write ``diag`` to stderr, colored by its level when color is on."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` styled, or unchanged when color is off."""
        ...
