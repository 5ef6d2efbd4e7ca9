# topmark:header:start
#
#   project      : Termprint
#   file         : formatting.py
#   file_relpath : src/termprint/rendering/formatting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting helpers shared by every backend.

These helpers fix the textual contract that all renderers honor:
    - indentation: `INDENT_UNIT` (two spaces) per level;
    - timestamps: ``YYYY-MM-DDTHH:MM:SSZ`` (ISO-8601, UTC, second precision);
    - tags: ``file:line[:column]``, the timestamp, or the label text.

Backends only add decoration around these strings (brackets, code spans,
ANSI dimming); they never reformat them.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from termprint.constants import CODE_FENCE, INDENT_UNIT, TIMESTAMP_FORMAT
from termprint.term.tags import SourceLocation, TagKind

if TYPE_CHECKING:
    from termprint.term.tags import Tag


def indent(level: int) -> str:
    """Return the indentation prefix for ``level``."""
    return INDENT_UNIT * max(level, 0)


def indent_line(line: str, prefix: str) -> str:
    """Prefix ``line`` unless it is empty (no trailing whitespace is emitted)."""
    return prefix + line if line else ""


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines, dropping one trailing newline.

    ``""`` yields ``[""]`` so an empty text still occupies one line.
    """
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def indent_lines(text: str, level: int) -> list[str]:
    """Split ``text`` and indent every non-empty line to ``level``."""
    prefix: str = indent(level)
    return [indent_line(line, prefix) for line in split_lines(text)]


def format_timestamp(instant: datetime) -> str:
    """Return ``instant`` in the fixed timestamp format.

    Naive instants are taken to already be UTC; aware ones are converted.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def format_source_location(location: SourceLocation) -> str:
    """Return ``file:line`` or ``file:line:column``."""
    text = f"{location.file}:{location.line}"
    if location.column is not None:
        text += f":{location.column}"
    return text


def format_tag(tag: Tag) -> str:
    """Return the undecorated text of ``tag``."""
    if isinstance(tag.payload, SourceLocation):
        return format_source_location(tag.payload)
    if isinstance(tag.payload, datetime):
        return format_timestamp(tag.payload)
    return tag.payload


def bracket_label(tag: Tag) -> str:
    """Plain-text tag decoration: labels in brackets, everything else bare."""
    text: str = format_tag(tag)
    return f"[{text}]" if tag.kind is TagKind.LABEL else text


def _longest_backtick_run(text: str) -> int:
    longest: int = 0
    run: int = 0
    for ch in text:
        run = run + 1 if ch == "`" else 0
        longest = max(longest, run)
    return longest


def code_fence(content: str) -> str:
    """Return a backtick fence longer than any backtick run in ``content`` (at least three)."""
    return CODE_FENCE + "`" * max(_longest_backtick_run(content) - 2, 0)


def code_span(text: str) -> str:
    """Wrap ``text`` in a Markdown inline code span.

    The fence grows when ``text`` itself contains backticks, and padding is
    added when it starts or ends with one.
    """
    fence: str = "`" * (_longest_backtick_run(text) + 1)
    if text.startswith("`") or text.endswith("`"):
        return f"{fence} {text} {fence}"
    return f"{fence}{text}{fence}"


def code_span_tag(tag: Tag) -> str:
    """Markdown tag decoration: every tag becomes an inline code span."""
    return code_span(format_tag(tag))
