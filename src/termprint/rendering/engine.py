# topmark:header:start
#
#   project      : Termprint
#   file         : engine.py
#   file_relpath : src/termprint/rendering/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tree walk shared by all backends.

The walk is the same for every backend:
    1. visit nodes depth-first, pre-order;
    2. track the indentation level (sections and lists go one level deeper,
       except Markdown sections, whose heading level carries the nesting;
       list items hold no blank lines or headings in any backend);
    3. emit each node's tags, one per line and in attachment order, before
       the node's own content;
    4. emit the content with the backend's leaf rules.

Leaf rules live in a `BackendRules` record per backend, looked up from
`RULES`. The walk yields lines without their trailing newline;
[`iter_lines`][termprint.rendering.engine.iter_lines] adds them.

Rendering is pure: it reads the term and the capability descriptor only,
performs no I/O, and returns the same output on every call.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import click

from termprint.config.logging import get_logger
from termprint.rendering.backends import Backend, Capabilities
from termprint.rendering.formatting import (
    bracket_label,
    code_fence,
    code_span_tag,
    indent,
    indent_line,
    split_lines,
)
from termprint.rendering.styles import style_markdown, style_plain, style_terminal
from termprint.term.errors import EmptyTermError
from termprint.term.nodes import (
    CodeBlock,
    Field,
    ListBlock,
    Section,
    Style,
    Styled,
    Text,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator, Mapping

    from termprint.config.logging import TermprintLogger
    from termprint.term.nodes import InlineNode, Node, Term
    from termprint.term.tags import Tag

logger: TermprintLogger = get_logger(__name__)


def _identity(text: str) -> str:
    return text


@dataclass(frozen=True, slots=True)
class BackendRules:
    """Leaf formatting rules for one backend.

    Attributes:
        decorate_tag (Callable[[Tag], str]): Tag text with backend decoration.
        tag_line (Callable[[str], str]): Final touch applied to a tag line.
        style (Callable[[Style, str], str]): Inline style application.
        section_title (Callable[[str, int], str]): Title line from ``(title, depth)``.
        field_line (Callable[[str, str], str]): ``name: value`` line.
        fence_line (Callable[[str], str]): Final touch applied to code fences.
        sections_indent (bool): Whether section children go one level deeper.
        separate_blocks (bool): Whether sibling blocks are separated by a blank line.
        align_list_items (bool): Whether item continuation lines line up with
            the text after the marker (``"10. "`` needs four columns).
    """

    decorate_tag: Callable[[Tag], str]
    tag_line: Callable[[str], str]
    style: Callable[[Style, str], str]
    section_title: Callable[[str, int], str]
    field_line: Callable[[str, str], str]
    fence_line: Callable[[str], str]
    sections_indent: bool
    separate_blocks: bool
    align_list_items: bool = False

    def inside_list(self) -> BackendRules:
        """Return the rules for list-item bodies.

        Items never contain blank lines or headings: a section inside an item
        is a plain ``title:`` line with its children indented below it.
        """
        if self.sections_indent and not self.separate_blocks:
            return self
        return replace(
            self, section_title=_plain_title, sections_indent=True, separate_blocks=False
        )


def _plain_title(title: str, _depth: int) -> str:
    return f"{title}:"


def _plain_field(name: str, value: str) -> str:
    return f"{name}: {value}" if value else f"{name}:"


def _terminal_rules(caps: Capabilities) -> BackendRules:
    color: bool = caps.color

    def dim(text: str) -> str:
        return click.style(text, dim=True) if color and text else text

    def bold(text: str) -> str:
        return click.style(text, bold=True) if color and text else text

    def style(s: Style, text: str) -> str:
        return style_terminal(s, text, color=color)

    return BackendRules(
        decorate_tag=bracket_label,
        tag_line=dim,
        style=style,
        section_title=lambda title, _depth: f"{bold(title)}:",
        field_line=lambda name, value: _plain_field(bold(name), value),
        fence_line=dim,
        sections_indent=True,
        separate_blocks=False,
    )


def _markdown_rules(caps: Capabilities) -> BackendRules:
    max_level: int = caps.max_heading_level

    def heading(title: str, depth: int) -> str:
        marks: str = "#" * min(max(depth, 1), max_level)
        return f"{marks} {title}" if title else marks

    def field_line(name: str, value: str) -> str:
        key: str = style_markdown(Style.BOLD, name)
        return f"{key}: {value}" if value else f"{key}:"

    return BackendRules(
        decorate_tag=code_span_tag,
        tag_line=_identity,
        style=style_markdown,
        section_title=heading,
        field_line=field_line,
        fence_line=_identity,
        sections_indent=False,
        separate_blocks=True,
        align_list_items=True,
    )


def _file_rules(caps: Capabilities) -> BackendRules:  # pylint: disable=unused-argument
    return BackendRules(
        decorate_tag=bracket_label,
        tag_line=_identity,
        style=style_plain,
        section_title=_plain_title,
        field_line=_plain_field,
        fence_line=_identity,
        sections_indent=True,
        separate_blocks=False,
    )


RULES: Mapping[Backend, Callable[[Capabilities], BackendRules]] = {
    Backend.TERMINAL: _terminal_rules,
    Backend.MARKDOWN: _markdown_rules,
    Backend.FILE: _file_rules,
}


def rules_for(backend: Backend, caps: Capabilities) -> BackendRules:
    """Return the leaf rules of ``backend`` under ``caps``."""
    return RULES[backend](caps)


# --- walk ---------------------------------------------------------------------


def collect_tags(node: Node) -> tuple[Tag, ...]:
    """Return the tags shown before ``node``: its own, then those of inline children."""
    tags: tuple[Tag, ...] = node.tags
    if isinstance(node, Styled):
        tags += collect_tags(node.child)
    return tags


def _inline_lines(node: InlineNode, rules: BackendRules) -> list[str]:
    if isinstance(node, Text):
        return split_lines(node.text)
    return [rules.style(node.style, line) for line in _inline_lines(node.child, rules)]


class _Walker:
    """One render pass: a backend's rules plus the walk over a term."""

    def __init__(self, rules: BackendRules) -> None:
        self.rules = rules
        item_rules: BackendRules = rules.inside_list()
        self.items: _Walker = self if item_rules is rules else _Walker(item_rules)

    def sequence(self, nodes: Iterable[Node], level: int, depth: int) -> Iterator[str]:
        emitted: bool = False
        for node in nodes:
            lines: list[str] = list(self.node(node, level, depth))
            if not lines:
                continue
            if emitted and self.rules.separate_blocks:
                yield ""
            emitted = True
            yield from lines

    def tag_lines(self, tags: Iterable[Tag], level: int) -> list[str]:
        prefix: str = indent(level)
        return [prefix + self.rules.tag_line(self.rules.decorate_tag(t)) for t in tags]

    def node(self, node: Node, level: int, depth: int) -> Iterator[str]:
        body: list[str] = list(self.body(node, level, depth))
        parts: list[list[str]] = [[line] for line in self.tag_lines(collect_tags(node), level)]
        if body:
            parts.append(body)
        for i, part in enumerate(parts):
            if i and self.rules.separate_blocks:
                yield ""
            yield from part

    def body(self, node: Node, level: int, depth: int) -> Iterator[str]:
        prefix: str = indent(level)
        if isinstance(node, (Text, Styled)):
            for line in _inline_lines(node, self.rules):
                yield indent_line(line, prefix)
        elif isinstance(node, Field):
            first, *rest = split_lines(node.value)
            yield prefix + self.rules.field_line(node.name, first)
            deeper: str = indent(level + 1)
            for line in rest:
                yield indent_line(line, deeper)
        elif isinstance(node, CodeBlock):
            yield from self.code_block(node, prefix)
        elif isinstance(node, Section):
            yield from self.section(node, level, depth)
        elif isinstance(node, ListBlock):
            yield from self.list_block(node, level, depth)
        else:  # pragma: no cover - closed set of node types
            raise TypeError(f"unsupported node type: {type(node).__name__}")

    def code_block(self, node: CodeBlock, prefix: str) -> Iterator[str]:
        fence: str = code_fence(node.content)
        yield prefix + self.rules.fence_line(fence + (node.language or ""))
        if node.content:
            for line in split_lines(node.content):
                yield indent_line(line, prefix)
        yield prefix + self.rules.fence_line(fence)

    def section(self, node: Section, level: int, depth: int) -> Iterator[str]:
        yield indent(level) + self.rules.section_title(node.title, depth + 1)
        child_level: int = level + 1 if self.rules.sections_indent else level
        children: list[str] = list(self.sequence(node.children, child_level, depth + 1))
        if children and self.rules.separate_blocks:
            yield ""
        yield from children

    def list_block(self, node: ListBlock, level: int, depth: int) -> Iterator[str]:
        outer: str = indent(level)
        for line in self.list_lines(node, depth):
            yield indent_line(line, outer)

    def list_lines(self, node: ListBlock, depth: int) -> Iterator[str]:
        """Yield the lines of ``node`` relative to the list's own margin."""
        pad: str = indent(1)
        number: int = 0
        for item in node.items:
            if isinstance(item, ListBlock):
                # Nested list: under the previous item, no marker of its own.
                nested: list[str] = self.tag_lines(item.tags, 0)
                nested.extend(self.list_lines(item, depth))
                for line in nested:
                    yield indent_line(line, pad)
                continue
            number += 1
            marker: str = f"{number}. " if node.ordered else "- "
            if self.rules.align_list_items:
                pad = " " * len(marker)
            yield from self.tag_lines(collect_tags(item), 0)
            first, *rest = list(self.items.body(item, 0, depth)) or [""]
            yield marker + first if first else marker.rstrip()
            for line in rest:
                yield indent_line(line, pad)


def iter_lines(term: Term, backend: Backend, caps: Capabilities) -> Iterator[str]:
    """Yield the rendered lines of ``term``, each terminated by a newline.

    Args:
        term (Term): Finished document.
        backend (Backend): Target backend.
        caps (Capabilities): Capability descriptor.

    Yields:
        str: One output line including its trailing ``"\\n"``.

    Raises:
        EmptyTermError: If ``term`` is empty and ``caps.allow_empty`` is False.
    """
    if term.is_empty and not caps.allow_empty:
        raise EmptyTermError()
    logger.debug("Rendering %d top-level node(s) for %s", len(term.children), backend.key)
    walker = _Walker(rules_for(backend, caps))
    for line in walker.sequence(term.children, 0, 0):
        yield line + "\n"
