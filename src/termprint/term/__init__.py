# topmark:header:start
#
#   project      : Termprint
#   file         : __init__.py
#   file_relpath : src/termprint/term/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The term model: tags, nodes, the builder and the machine format.

Public modules:
    - termprint.term.builder
    - termprint.term.errors
    - termprint.term.nodes
    - termprint.term.serializers
    - termprint.term.tags
"""

from __future__ import annotations

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
    "CodeBlock",
    "EmptyTermError",
    "Field",
    "ListBlock",
    "NoCurrentNodeError",
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
]
