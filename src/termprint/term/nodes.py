# topmark:header:start
#
#   project      : Termprint
#   file         : nodes.py
#   file_relpath : src/termprint/term/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The term document model.

A `Term` is a strict tree of frozen nodes. Each node exclusively owns its
children (no sharing, no cycles) and carries an ordered tuple of tags,
displayed in insertion order before the node's own content.

Node kinds:
    * `Text`: a run of text, possibly spanning several lines.
    * `Styled`: an inline style applied to an inline child (`Text` or `Styled`).
    * `Section`: a titled group of child nodes; nesting increases depth.
    * `ListBlock`: bulleted or numbered items.
    * `CodeBlock`: verbatim content with an optional language annotation.
    * `Field`: a single ``name: value`` line.

Terms are produced by [`TermBuilder`][termprint.term.builder.TermBuilder] and
are read-only once finished, so they can be rendered from several threads
at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterator

    from termprint.term.tags import Tag


class Style(Enum):
    """Inline styles a node can request.

    Backends that cannot express a style degrade it to plain text.
    """

    BOLD = "bold"
    ITALIC = "italic"
    DIM = "dim"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"

    # Color variants
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @property
    def is_color(self) -> bool:
        """True for the color variants."""
        return self in _COLOR_STYLES


_COLOR_STYLES: frozenset[Style] = frozenset(
    {Style.RED, Style.GREEN, Style.YELLOW, Style.BLUE, Style.MAGENTA, Style.CYAN, Style.WHITE}
)


@dataclass(frozen=True, slots=True)
class Text:
    """A run of text."""

    text: str
    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class Styled:
    """An inline style applied to an inline child node."""

    style: Style
    child: InlineNode
    tags: tuple[Tag, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.child, INLINE_NODE_TYPES):
            raise TypeError(
                f"Styled child must be Text or Styled, not {type(self.child).__name__}"
            )


@dataclass(frozen=True, slots=True)
class Section:
    """A titled group of child nodes."""

    title: str
    children: tuple[Node, ...] = ()
    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class ListBlock:
    """Bulleted (``ordered=False``) or numbered (``ordered=True``) items."""

    items: tuple[Node, ...] = ()
    ordered: bool = False
    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Verbatim content, never highlighted."""

    language: str | None
    content: str
    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class Field:
    """A ``name: value`` line, as produced when printing objects."""

    name: str
    value: str
    tags: tuple[Tag, ...] = ()


InlineNode = Union[Text, Styled]
Node = Union[Text, Styled, Section, ListBlock, CodeBlock, Field]

INLINE_NODE_TYPES: tuple[type, ...] = (Text, Styled)


def child_nodes(node: Node) -> tuple[Node, ...]:
    """Return the direct children of ``node`` in document order."""
    if isinstance(node, Section):
        return node.children
    if isinstance(node, ListBlock):
        return node.items
    if isinstance(node, Styled):
        return (node.child,)
    return ()


@dataclass(frozen=True, slots=True)
class Term:
    """A finished, read-only document.

    Attributes:
        children (tuple[Node, ...]): Top-level nodes in document order.
    """

    children: tuple[Node, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """True when the term has no nodes at all."""
        return not self.children

    @property
    def depth(self) -> int:
        """Maximum `Section` nesting in the tree (0 when there are no sections)."""
        return max((d for _, d in self.walk()), default=0)

    def walk(self) -> Iterator[tuple[Node, int]]:
        """Yield ``(node, section_depth)`` pairs depth-first, pre-order.

        ``section_depth`` counts the sections enclosing the node, the node
        itself included when it is a `Section`.
        """
        stack: list[tuple[Node, int]] = [(n, 0) for n in reversed(self.children)]
        while stack:
            node, parent_depth = stack.pop()
            depth: int = parent_depth + 1 if isinstance(node, Section) else parent_depth
            yield node, depth
            stack.extend((c, depth) for c in reversed(child_nodes(node)))

    def __len__(self) -> int:
        """Return the total number of nodes in the tree."""
        return sum(1 for _ in self.walk())
