# topmark:header:start
#
#   project      : Termprint
#   file         : sinks.py
#   file_relpath : src/termprint/rendering/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sinks for rendered terms.

Rendering never performs I/O; these small sinks are the caller-side helpers
that put rendered text somewhere:

- `StreamSink`: writes to an already-open text stream (e.g. ``sys.stdout``).
- `FileSink`: creates (or truncates) a file and writes to it.
- `NullSink`: accepts and discards everything.

All sinks implement the `Sink` protocol and may be used as context managers.
I/O errors propagate to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TextIO, TypeVar

from termprint.config.logging import get_logger

if TYPE_CHECKING:
    from types import TracebackType

    from termprint.config.logging import TermprintLogger
    from termprint.rendering.api import Renderer
    from termprint.term.nodes import Term

logger: TermprintLogger = get_logger(__name__)

_S = TypeVar("_S", bound="_SinkBase")


class Sink(Protocol):
    """Minimal interface for a destination of rendered text."""

    def write(self, text: str) -> int:
        """Write ``text`` and return the number of characters accepted."""
        ...

    def flush(self) -> None:
        """Flush buffered output, if any."""
        ...

    def close(self) -> None:
        """Release the underlying resource, if any."""
        ...


class _SinkBase:
    def flush(self) -> None:
        """Flush buffered output (no-op by default)."""

    def close(self) -> None:
        """Release the underlying resource (no-op by default)."""

    def __enter__(self: _S) -> _S:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class StreamSink(_SinkBase):
    """Write to a caller-owned text stream; `close()` only flushes it."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, text: str) -> int:
        """Write ``text`` to the stream."""
        return self.stream.write(text)

    def flush(self) -> None:
        """Flush the stream."""
        self.stream.flush()

    def close(self) -> None:
        """Flush the stream; the caller keeps ownership of it."""
        self.flush()


class FileSink(_SinkBase):
    """Write to a file created (or truncated) on construction.

    Args:
        path (str | Path): Destination path.
        encoding (str): Text encoding. Defaults to UTF-8.

    Raises:
        OSError: If the file cannot be created.
    """

    def __init__(self, path: str | Path, *, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self._file: TextIO = self.path.open("w", encoding=encoding, newline="")
        logger.debug("Opened file sink %s", self.path)

    def write(self, text: str) -> int:
        """Write ``text`` to the file."""
        return self._file.write(text)

    def flush(self) -> None:
        """Flush the file buffer."""
        self._file.flush()

    def close(self) -> None:
        """Close the file. Safe to call more than once."""
        if not self._file.closed:
            self._file.close()
            logger.debug("Closed file sink %s", self.path)


class NullSink(_SinkBase):
    """Accept everything and keep nothing."""

    def write(self, text: str) -> int:
        """Pretend ``text`` was written."""
        return len(text)


def emit(term: Term, renderer: Renderer, sink: Sink) -> int:
    """Render ``term`` with ``renderer`` into ``sink`` line by line.

    Args:
        term (Term): Finished document.
        renderer (Renderer): Renderer to use.
        sink (Sink): Destination.

    Returns:
        int: Number of characters accepted by the sink.
    """
    written: int = 0
    for line in renderer.iter_lines(term):
        written += sink.write(line)
    sink.flush()
    return written
