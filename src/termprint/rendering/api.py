# topmark:header:start
#
#   project      : Termprint
#   file         : api.py
#   file_relpath : src/termprint/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""API for rendering finished terms.

A `Renderer` pairs a [`Backend`][termprint.rendering.backends.Backend] with a
[`Capabilities`][termprint.rendering.backends.Capabilities] descriptor. It holds
no other state, so one instance can render any number of terms, from any
number of threads, as long as the terms are finished.

The buffered (`render`) and streaming (`render_to`) variants consume the
same line iterator and therefore produce identical text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from termprint.config.logging import get_logger
from termprint.constants import MAX_HEADING_LEVEL
from termprint.rendering.backends import Backend, Capabilities
from termprint.rendering.engine import iter_lines

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import TextIO

    from termprint.config.logging import TermprintLogger
    from termprint.term.nodes import Term

logger: TermprintLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Renderer:
    """Render terms for one backend.

    Attributes:
        backend (Backend): Target backend.
        capabilities (Capabilities): What the target may express.
    """

    backend: Backend
    capabilities: Capabilities = field(default_factory=Capabilities)

    @classmethod
    def for_backend(
        cls,
        name: str | Backend,
        *,
        color: bool = False,
        max_heading_level: int | None = None,
        allow_empty: bool = True,
    ) -> Renderer:
        """Build a renderer from a backend name (key, member name or alias).

        Args:
            name (str | Backend): Backend or backend token such as ``"md"``.
            color (bool): Allow ANSI color (Terminal only).
            max_heading_level (int | None): Deepest Markdown heading level.
            allow_empty (bool): Render empty terms as ``""``.

        Returns:
            Renderer: The configured renderer.

        Raises:
            ValueError: If ``name`` matches no backend.
        """
        backend: Backend | None = name if isinstance(name, Backend) else Backend.parse(name)
        if backend is None:
            raise ValueError(
                f"Unknown backend {name!r}; expected one of: {', '.join(Backend.keys())}"
            )
        caps = Capabilities(
            color=color,
            max_heading_level=(
                MAX_HEADING_LEVEL if max_heading_level is None else max_heading_level
            ),
            allow_empty=allow_empty,
        )
        return cls(backend, caps)

    def iter_lines(self, term: Term) -> Iterator[str]:
        """Yield the rendered output line by line (each ending with a newline)."""
        return iter_lines(term, self.backend, self.capabilities)

    def render(self, term: Term) -> str:
        """Return the rendered output as one string.

        Raises:
            EmptyTermError: If ``term`` is empty and empty terms are not allowed.
        """
        return "".join(self.iter_lines(term))

    def render_to(self, term: Term, stream: TextIO) -> int:
        """Write the rendered output to ``stream``.

        The text written is identical to `render(term)`. Errors raised by the
        stream propagate to the caller.

        Args:
            term (Term): Finished document.
            stream (TextIO): Destination text stream.

        Returns:
            int: Number of characters written.
        """
        written: int = 0
        for line in self.iter_lines(term):
            stream.write(line)
            written += len(line)
        logger.trace("Wrote %d character(s) for %s", written, self.backend.key)
        return written


def render_term(
    term: Term,
    backend: Backend | str = Backend.FILE,
    *,
    color: bool = False,
    max_heading_level: int | None = None,
) -> str:
    """Render ``term`` for ``backend`` in a single call.

    Args:
        term (Term): Finished document.
        backend (Backend | str): Backend or backend token.
        color (bool): Allow ANSI color (Terminal only).
        max_heading_level (int | None): Deepest Markdown heading level.

    Returns:
        str: The rendered text.
    """
    renderer = Renderer.for_backend(backend, color=color, max_heading_level=max_heading_level)
    return renderer.render(term)
