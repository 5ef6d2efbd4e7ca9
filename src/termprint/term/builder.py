# topmark:header:start
#
#   project      : Termprint
#   file         : builder.py
#   file_relpath : src/termprint/term/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Incremental construction of `Term` documents.

`TermBuilder` is the mutable counterpart of the frozen
[`Term`][termprint.term.nodes.Term]: callers append nodes, open and close
sections, and attach tags while the document grows, then call `finish()` to
obtain an immutable snapshot.

Contract:
    - `attach_tag()` decorates the most recently appended node, wherever it
      sits in the tree. A section counts as appended as soon as it is begun.
    - `begin_section()` / `end_section()` must pair up. Closing a section
      that is not open, or finishing with sections still open, raises
      [`UnbalancedSectionError`][termprint.term.errors.UnbalancedSectionError].
    - `finish()` copies the drafts into frozen nodes. The returned `Term`
      shares nothing with the builder, so later builder calls never change it.

A builder is meant to be used from a single thread.

Example:
    ```python
    builder = TermBuilder()
    with builder.section("Result"):
        builder.append_text("ok").attach_tag(Tag.label("test tagging"))
        builder.append_code_block("json", "{}")
    term = builder.finish()
    ```
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, cast

from termprint.config.logging import get_logger
from termprint.term.errors import NoCurrentNodeError, UnbalancedSectionError
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

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from termprint.config.logging import TermprintLogger
    from termprint.term.nodes import Node
    from termprint.term.tags import Tag

logger: TermprintLogger = get_logger(__name__)


@dataclass
class _NodeDraft:
    """Mutable stand-in for a node under construction.

    ``node`` is a frozen template without tags; sections keep their children
    as drafts in ``children`` until they are frozen.
    """

    node: Node
    tags: list[Tag] = field(default_factory=lambda: [])
    children: list[_NodeDraft] | None = None

    def freeze(self) -> Node:
        node: Node = self.node
        if self.children is not None and isinstance(node, Section):
            node = replace(node, children=tuple(c.freeze() for c in self.children))
        if self.tags:
            node = replace(node, tags=node.tags + tuple(self.tags))
        return node


def format_scalar(value: object) -> str:
    """Return the display text of a scalar the way object printing shows it.

    ``None`` becomes ``null`` and booleans become ``true``/``false``; anything
    else goes through ``str()``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_item_node(item: str | Node) -> Node:
    return Text(item) if isinstance(item, str) else item


class TermBuilder:
    """Mutable builder producing a frozen `Term` on `finish()`."""

    def __init__(self) -> None:
        self._root: list[_NodeDraft] = []
        self._open: list[_NodeDraft] = []
        self._current: _NodeDraft | None = None
        self._max_depth: int = 0

    # --- introspection ---

    @property
    def open_sections(self) -> int:
        """Number of sections begun but not yet ended."""
        return len(self._open)

    @property
    def max_depth(self) -> int:
        """Deepest section nesting reached so far."""
        return self._max_depth

    # --- appending ---

    def _siblings(self) -> list[_NodeDraft]:
        if self._open:
            # Open sections are always created with a children list.
            return cast("list[_NodeDraft]", self._open[-1].children)
        return self._root

    def _append(self, node: Node, *, children: list[_NodeDraft] | None = None) -> _NodeDraft:
        draft = _NodeDraft(node=node, children=children)
        self._siblings().append(draft)
        self._current = draft
        self._max_depth = max(self._max_depth, len(self._open) + Term((node,)).depth)
        logger.trace("Appended %s at depth %d", type(node).__name__, len(self._open))
        return draft

    def append_node(self, node: Node) -> TermBuilder:
        """Append an already-built node (with any tags it carries).

        Args:
            node (Node): The node to append.

        Returns:
            TermBuilder: This builder, for chaining.
        """
        self._append(node)
        return self

    def append_text(self, text: str) -> TermBuilder:
        """Append a `Text` node."""
        self._append(Text(text))
        return self

    def append_styled(self, style: Style, text: str) -> TermBuilder:
        """Append ``text`` wrapped in a `Styled` node."""
        self._append(Styled(style, Text(text)))
        return self

    def append_list(self, items: Iterable[str | Node], ordered: bool = False) -> TermBuilder:
        """Append a bulleted or numbered list.

        Args:
            items (Iterable[str | Node]): Item contents. Strings become `Text` nodes.
            ordered (bool): Number the items instead of bulleting them.

        Returns:
            TermBuilder: This builder, for chaining.
        """
        self._append(ListBlock(tuple(_as_item_node(i) for i in items), ordered))
        return self

    def append_code_block(self, language: str | None, content: str) -> TermBuilder:
        """Append a verbatim code block, optionally annotated with ``language``."""
        self._append(CodeBlock(language or None, content))
        return self

    def append_field(self, name: str, value: object) -> TermBuilder:
        """Append a ``name: value`` line; ``value`` is shown via `format_scalar`."""
        self._append(Field(name, format_scalar(value)))
        return self

    def append_object(self, name: str, value: Any) -> TermBuilder:
        """Append a JSON-like value as nested sections and fields.

        Mappings (and dataclass instances) become a section whose entries are
        appended recursively; sequences become a section with ``[index]``
        entries; anything else becomes a single field. `attach_tag()` then
        targets the outermost node created here.

        Args:
            name (str): Label of the outermost node.
            value (Any): Value to print.

        Returns:
            TermBuilder: This builder, for chaining.
        """
        draft: _NodeDraft = self._object_draft(name, value)
        self._siblings().append(draft)
        self._current = draft
        depth: int = len(self._open) + _draft_depth(draft)
        self._max_depth = max(self._max_depth, depth)
        logger.trace("Appended object %r at depth %d", name, len(self._open))
        return self

    def _object_draft(self, name: str, value: Any) -> _NodeDraft:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            value = dataclasses.asdict(value)
        if isinstance(value, Mapping):
            entries = [self._object_draft(str(k), v) for k, v in value.items()]
            return _NodeDraft(node=Section(name), children=entries)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            entries = [self._object_draft(f"[{i}]", v) for i, v in enumerate(value)]
            return _NodeDraft(node=Section(name), children=entries)
        return _NodeDraft(node=Field(name, format_scalar(value)))

    # --- sections ---

    def begin_section(self, title: str) -> TermBuilder:
        """Open a section; subsequent appends go inside it until `end_section()`.

        Returns:
            TermBuilder: This builder, now positioned inside the new section.
        """
        draft: _NodeDraft = self._append(Section(title), children=[])
        self._open.append(draft)
        return self

    def end_section(self) -> TermBuilder:
        """Close the innermost open section.

        Raises:
            UnbalancedSectionError: If no section is open.
        """
        if not self._open:
            raise UnbalancedSectionError("end_section() called with no open section")
        closed: _NodeDraft = self._open.pop()
        logger.trace("Closed section %r", getattr(closed.node, "title", ""))
        return self

    @contextmanager
    def section(self, title: str) -> Iterator[TermBuilder]:
        """Scope a section: begin it on entry and end it on exit.

        Args:
            title (str): Section title.

        Yields:
            TermBuilder: This builder, positioned inside the section.
        """
        self.begin_section(title)
        try:
            yield self
        finally:
            self.end_section()

    # --- tags ---

    def attach_tag(self, tag: Tag) -> TermBuilder:
        """Attach ``tag`` to the most recently appended node.

        Raises:
            NoCurrentNodeError: If nothing has been appended yet.
        """
        if self._current is None:
            raise NoCurrentNodeError("attach_tag")
        self._current.tags.append(tag)
        logger.trace("Attached %s tag to %s", tag.kind.value, type(self._current.node).__name__)
        return self

    def attach_tags(self, tags: Iterable[Tag]) -> TermBuilder:
        """Attach several tags, in order, to the most recently appended node."""
        for tag in tags:
            self.attach_tag(tag)
        return self

    # --- completion ---

    def finish(self) -> Term:
        """Return the finished, immutable document.

        Raises:
            UnbalancedSectionError: If sections are still open.
        """
        if self._open:
            raise UnbalancedSectionError(
                f"finish() called with {len(self._open)} open section(s)",
                open_sections=len(self._open),
            )
        term = Term(tuple(d.freeze() for d in self._root))
        logger.debug(
            "Finished term: %d top-level node(s), depth %d", len(term.children), term.depth
        )
        return term


def _draft_depth(draft: _NodeDraft) -> int:
    if draft.children is None:
        return 0
    return 1 + max((_draft_depth(c) for c in draft.children), default=0)
