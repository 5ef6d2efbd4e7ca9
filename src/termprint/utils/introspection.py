# topmark:header:start
#
#   project      : Termprint
#   file         : introspection.py
#   file_relpath : src/termprint/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Call-site capture for source-location tags.

The term model never inspects the call stack itself; this helper is the
caller-side collaborator that turns "the line that called me" into a
`SourceLocation` tag.
"""

from __future__ import annotations

import inspect
import sys
from typing import TYPE_CHECKING

from termprint.config.logging import get_logger
from termprint.term.tags import Tag

if TYPE_CHECKING:
    from types import FrameType

    from termprint.config.logging import TermprintLogger

logger: TermprintLogger = get_logger(__name__)


def _frame_column(frame: FrameType) -> int | None:
    """Return the 1-based column of the frame's current instruction, if known."""
    if sys.version_info < (3, 11):
        return None
    positions = inspect.getframeinfo(frame).positions
    if positions is None or positions.col_offset is None:
        return None
    return positions.col_offset + 1


def caller_location(stacklevel: int = 1) -> Tag:
    """Return a source-location tag for a frame of the caller.

    Args:
        stacklevel (int): ``1`` designates the function calling
            `caller_location`, ``2`` its caller, and so on.

    Returns:
        Tag: A `SourceLocation` tag with file, line and (on Python 3.11+) column.

    Raises:
        ValueError: If ``stacklevel`` is smaller than 1 or deeper than the stack.
    """
    if stacklevel < 1:
        raise ValueError(f"stacklevel must be >= 1, got {stacklevel}")
    frame: FrameType | None = inspect.currentframe()
    try:
        for _ in range(stacklevel):
            frame = frame.f_back if frame is not None else None
        if frame is None:
            raise ValueError(f"stacklevel {stacklevel} is deeper than the call stack")
        tag: Tag = Tag.source_location(
            frame.f_code.co_filename, frame.f_lineno, _frame_column(frame)
        )
    finally:
        del frame
    logger.trace("Captured caller location %r", tag.payload)
    return tag
