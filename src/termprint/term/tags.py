# topmark:header:start
#
#   project      : Termprint
#   file         : tags.py
#   file_relpath : src/termprint/term/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable metadata attached to term nodes.

A tag is one of:
    * a source location (``file``, ``line`` and an optional ``column``),
      usually supplied by an error-context helper at the call site;
    * a timestamp (an absolute instant, stored in UTC);
    * a free-form label, such as the name of the test that produced the entry.

Tags are plain values: they compare and hash structurally, are created once
and never mutated. Constructors accept any input as-is; validating file paths
or line numbers is the caller's concern.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Union


class TagKind(str, Enum):
    """Discriminator for the tag payload."""

    SOURCE_LOCATION = "source_location"
    TIMESTAMP = "timestamp"
    LABEL = "label"


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position in a source file: ``file:line[:column]``."""

    file: str
    line: int
    column: int | None = None


TagPayload = Union[SourceLocation, datetime, str]


def _as_utc(instant: datetime) -> datetime:
    # Naive instants are taken to already be UTC.
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


@dataclass(frozen=True, slots=True)
class Tag:
    """A single piece of metadata attached to a node.

    Use the ``source_location``, ``timestamp`` and ``label`` constructors
    rather than building instances by hand, so the payload always matches
    ``kind``.

    Attributes:
        kind (TagKind): Which variant this tag is.
        payload (TagPayload): A `SourceLocation`, an aware UTC `datetime`, or
            the label string.
    """

    kind: TagKind
    payload: TagPayload

    @classmethod
    def source_location(cls, file: str, line: int, column: int | None = None) -> Tag:
        """Return a source-location tag.

        Args:
            file (str): File path, used verbatim.
            line (int): Line number.
            column (int | None): Optional column number.

        Returns:
            Tag: The new tag.
        """
        return cls(TagKind.SOURCE_LOCATION, SourceLocation(file, line, column))

    @classmethod
    def timestamp(cls, instant: datetime) -> Tag:
        """Return a timestamp tag for ``instant``, normalized to UTC."""
        return cls(TagKind.TIMESTAMP, _as_utc(instant))

    @classmethod
    def label(cls, text: str) -> Tag:
        """Return a label tag carrying ``text`` verbatim."""
        return cls(TagKind.LABEL, text)

    @property
    def location(self) -> SourceLocation | None:
        """The source location payload, or ``None`` for other kinds."""
        return self.payload if isinstance(self.payload, SourceLocation) else None

    @property
    def instant(self) -> datetime | None:
        """The timestamp payload, or ``None`` for other kinds."""
        return self.payload if isinstance(self.payload, datetime) else None

    @property
    def text(self) -> str | None:
        """The label payload, or ``None`` for other kinds."""
        return self.payload if isinstance(self.payload, str) else None
