# topmark:header:start
#
#   project      : Termprint
#   file         : __init__.py
#   file_relpath : src/termprint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Termprint package.

Termprint renders structured, tagged output (sections, lists, code blocks,
key/value fields) into an interactive terminal, a Markdown document or a
plain-text file. Callers build a `Term` with `TermBuilder`, decorate nodes
with source-location, timestamp and label tags, and hand the finished term
to a `Renderer`.

Example:
    ```python
    from termprint import Backend, Tag, TermBuilder, render_term

    builder = TermBuilder()
    with builder.section("Result"):
        builder.append_text("ok").attach_tag(Tag.source_location("main.rs", 42, 7))
    print(render_term(builder.finish(), Backend.MARKDOWN), end="")
    ```
"""

from __future__ import annotations

from termprint.rendering.api import Renderer, render_term
from termprint.rendering.backends import Backend, Capabilities
from termprint.term.builder import TermBuilder
from termprint.term.errors import (
    EmptyTermError,
    NoCurrentNodeError,
    TermError,
    UnbalancedSectionError,
)
from termprint.term.nodes import (
    CodeBlock,
    Field,
    ListBlock,
    Section,
    Style,
    Styled,
    Term,
    Text,
)
from termprint.term.tags import SourceLocation, Tag, TagKind

__all__ = [
    "Backend",
    "Capabilities",
    "CodeBlock",
    "EmptyTermError",
    "Field",
    "ListBlock",
    "NoCurrentNodeError",
    "Renderer",
    "Section",
    "SourceLocation",
    "Style",
    "Styled",
    "Tag",
    "TagKind",
    "Term",
    "TermBuilder",
    "TermError",
    "Text",
    "UnbalancedSectionError",
    "render_term",
]
