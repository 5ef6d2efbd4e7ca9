# topmark:header:start
#
#   project      : Termprint
#   file         : serializers.py
#   file_relpath : src/termprint/term/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON-friendly conversion of terms (machine format).

Shapes:
    Document: ``{"children": [<node>, ...]}`` (a bare list of nodes is also
    accepted on input).

    Nodes (every node may carry ``"tags": [<tag>, ...]``):
        - ``{"kind": "text", "text": str}``
        - ``{"kind": "styled", "style": str, "child": <inline node>}``
        - ``{"kind": "section", "title": str, "children": [<node>, ...]}``
        - ``{"kind": "list", "ordered": bool, "items": [<node> | str, ...]}``
        - ``{"kind": "code_block", "language": str | null, "content": str}``
        - ``{"kind": "field", "name": str, "value": str | int | float | bool | null}``

    Tags:
        - ``{"kind": "source_location", "file": str, "line": int, "column": int | null}``
        - ``{"kind": "timestamp", "value": "YYYY-MM-DDTHH:MM:SS[.ffffff]Z"}``
        - ``{"kind": "label", "text": str}``

Malformed input raises `ValueError` naming the offending location.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from termprint.config.logging import get_logger
from termprint.constants import TIMESTAMP_FORMAT
from termprint.term.builder import TermBuilder, format_scalar
from termprint.term.nodes import (
    CodeBlock,
    Field,
    ListBlock,
    Section,
    Style,
    Styled,
    Text,
)
from termprint.term.tags import SourceLocation, Tag, TagKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from termprint.config.logging import TermprintLogger
    from termprint.term.nodes import InlineNode, Node, Term

logger: TermprintLogger = get_logger(__name__)


# --- to dict ------------------------------------------------------------------


def _timestamp_text(instant: datetime) -> str:
    # Full precision; the display format drops microseconds.
    return instant.astimezone(timezone.utc).replace(tzinfo=None).isoformat() + "Z"


def tag_to_dict(tag: Tag) -> dict[str, Any]:
    """Return the machine form of ``tag``."""
    if isinstance(tag.payload, SourceLocation):
        loc: SourceLocation = tag.payload
        return {"kind": tag.kind.value, "file": loc.file, "line": loc.line, "column": loc.column}
    if isinstance(tag.payload, datetime):
        return {"kind": tag.kind.value, "value": _timestamp_text(tag.payload)}
    return {"kind": tag.kind.value, "text": tag.payload}


def node_to_dict(node: Node) -> dict[str, Any]:
    """Return the machine form of ``node`` (recursively)."""
    data: dict[str, Any]
    if isinstance(node, Text):
        data = {"kind": "text", "text": node.text}
    elif isinstance(node, Styled):
        data = {"kind": "styled", "style": node.style.value, "child": node_to_dict(node.child)}
    elif isinstance(node, Section):
        data = {
            "kind": "section",
            "title": node.title,
            "children": [node_to_dict(c) for c in node.children],
        }
    elif isinstance(node, ListBlock):
        data = {
            "kind": "list",
            "ordered": node.ordered,
            "items": [node_to_dict(i) for i in node.items],
        }
    elif isinstance(node, CodeBlock):
        data = {"kind": "code_block", "language": node.language, "content": node.content}
    else:
        data = {"kind": "field", "name": node.name, "value": node.value}
    if node.tags:
        data["tags"] = [tag_to_dict(t) for t in node.tags]
    return data


def term_to_dict(term: Term) -> dict[str, Any]:
    """Return the machine form of a finished term."""
    return {"children": [node_to_dict(n) for n in term.children]}


# --- from dict ----------------------------------------------------------------


def _require(data: Mapping[str, Any], key: str, kind: type | tuple[type, ...], where: str) -> Any:
    if key not in data:
        raise ValueError(f"{where}: missing key {key!r}")
    value: Any = data[key]
    if not isinstance(value, kind):
        raise ValueError(f"{where}.{key}: unexpected type {type(value).__name__}")
    return value


def _as_mapping(data: object, where: str) -> Mapping[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected an object, got {type(data).__name__}")
    return data


def _parse_timestamp(raw: str, where: str) -> datetime:
    try:
        return datetime.strptime(raw, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw[:-1] + "+00:00" if raw.endswith("Z") else raw)
    except ValueError as exc:
        raise ValueError(f"{where}: invalid timestamp {raw!r}") from exc


def tag_from_dict(data: object, where: str = "tag") -> Tag:
    """Rebuild a tag from its machine form.

    Raises:
        ValueError: If ``data`` is not a valid tag.
    """
    mapping = _as_mapping(data, where)
    kind: str = _require(mapping, "kind", str, where)
    if kind == TagKind.SOURCE_LOCATION.value:
        column: Any = mapping.get("column")
        if column is not None and (isinstance(column, bool) or not isinstance(column, int)):
            raise ValueError(f"{where}.column: unexpected type {type(column).__name__}")
        line: Any = _require(mapping, "line", int, where)
        if isinstance(line, bool):
            raise ValueError(f"{where}.line: unexpected type bool")
        return Tag.source_location(_require(mapping, "file", str, where), line, column)
    if kind == TagKind.TIMESTAMP.value:
        return Tag.timestamp(_parse_timestamp(_require(mapping, "value", str, where), where))
    if kind == TagKind.LABEL.value:
        return Tag.label(_require(mapping, "text", str, where))
    raise ValueError(f"{where}.kind: unknown tag kind {kind!r}")


def _tags_from(mapping: Mapping[str, Any], where: str) -> tuple[Tag, ...]:
    raw: Any = mapping.get("tags", [])
    if not isinstance(raw, list):
        raise ValueError(f"{where}.tags: expected a list")
    return tuple(tag_from_dict(t, f"{where}.tags[{i}]") for i, t in enumerate(raw))


def _parse_style(raw: str, where: str) -> Style:
    try:
        return Style(raw.strip().lower())
    except ValueError as exc:
        raise ValueError(f"{where}.style: unknown style {raw!r}") from exc


def node_from_dict(data: object, where: str = "node") -> Node:
    """Rebuild a node (recursively) from its machine form.

    Strings are accepted as shorthand for text nodes.

    Raises:
        ValueError: If ``data`` is not a valid node.
    """
    if isinstance(data, str):
        return Text(data)
    mapping = _as_mapping(data, where)
    kind: str = _require(mapping, "kind", str, where)
    tags: tuple[Tag, ...] = _tags_from(mapping, where)

    if kind == "text":
        return Text(_require(mapping, "text", str, where), tags)
    if kind == "styled":
        raw_child: Any = _require(mapping, "child", (dict, str), where)
        child: Node = node_from_dict(raw_child, f"{where}.child")
        if not isinstance(child, (Text, Styled)):
            raise ValueError(f"{where}.child: styled content must be text or styled")
        inline: InlineNode = child
        return Styled(_parse_style(_require(mapping, "style", str, where), where), inline, tags)
    if kind == "section":
        children: list[Any] = mapping.get("children", [])
        if not isinstance(children, list):
            raise ValueError(f"{where}.children: expected a list")
        return Section(
            _require(mapping, "title", str, where),
            tuple(node_from_dict(c, f"{where}.children[{i}]") for i, c in enumerate(children)),
            tags,
        )
    if kind == "list":
        items: list[Any] = _require(mapping, "items", list, where)
        ordered: Any = mapping.get("ordered", False)
        if not isinstance(ordered, bool):
            raise ValueError(f"{where}.ordered: expected a boolean")
        return ListBlock(
            tuple(node_from_dict(c, f"{where}.items[{i}]") for i, c in enumerate(items)),
            ordered,
            tags,
        )
    if kind == "code_block":
        language: Any = mapping.get("language")
        if language is not None and not isinstance(language, str):
            raise ValueError(f"{where}.language: expected a string or null")
        return CodeBlock(language or None, _require(mapping, "content", str, where), tags)
    if kind == "field":
        value: Any = _require(mapping, "value", (str, int, float, bool, type(None)), where)
        return Field(_require(mapping, "name", str, where), format_scalar(value), tags)
    raise ValueError(f"{where}.kind: unknown node kind {kind!r}")


def term_from_dict(data: object) -> Term:
    """Rebuild a finished term from its machine form.

    Args:
        data (object): A ``{"children": [...]}`` mapping or a bare list of nodes.

    Returns:
        Term: The rebuilt term.

    Raises:
        ValueError: If ``data`` is not a valid document.
    """
    if isinstance(data, dict):
        nodes: Any = data.get("children", [])
    else:
        nodes = data
    if not isinstance(nodes, list):
        raise ValueError("document: expected a list of nodes")

    builder = TermBuilder()
    for i, raw in enumerate(nodes):
        builder.append_node(node_from_dict(raw, f"children[{i}]"))
    term: Term = builder.finish()
    logger.debug("Loaded term with %d top-level node(s)", len(term.children))
    return term
