# topmark:header:start
#
#   project      : Termprint
#   file         : test_builder.py
#   file_relpath : tests/term/test_builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `TermBuilder`: appending, sections, tag attachment and finishing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pytest

from termprint.term.builder import TermBuilder, format_scalar
from termprint.term.errors import NoCurrentNodeError, UnbalancedSectionError
from termprint.term.nodes import (
    CodeBlock,
    Field,
    ListBlock,
    Section,
    Style,
    Styled,
    Text,
)
from termprint.term.tags import Tag
from tests.conftest import parametrize

if TYPE_CHECKING:
    from termprint.term.nodes import Term


def test_append_methods_chain_and_keep_order() -> None:
    """Every append returns the builder and nodes keep insertion order."""
    term: Term = (
        TermBuilder()
        .append_text("a")
        .append_styled(Style.BOLD, "b")
        .append_list(["x", "y"], ordered=True)
        .append_code_block("json", "{}")
        .append_field("k", 1)
        .finish()
    )
    assert term.children == (
        Text("a"),
        Styled(Style.BOLD, Text("b")),
        ListBlock((Text("x"), Text("y")), ordered=True),
        CodeBlock("json", "{}"),
        Field("k", "1"),
    )


def test_empty_builder_finishes_to_empty_term() -> None:
    term: Term = TermBuilder().finish()
    assert term.is_empty
    assert term.depth == 0
    assert len(term) == 0


def test_code_block_empty_language_becomes_none() -> None:
    term: Term = TermBuilder().append_code_block("", "x").finish()
    assert term.children == (CodeBlock(None, "x"),)


def test_sections_nest_children() -> None:
    builder = TermBuilder()
    builder.begin_section("outer").append_text("one")
    builder.begin_section("inner").append_text("two").end_section()
    builder.end_section().append_text("after")
    term: Term = builder.finish()

    assert term.children == (
        Section("outer", (Text("one"), Section("inner", (Text("two"),)))),
        Text("after"),
    )
    assert term.depth == 2
    assert builder.max_depth == 2


def test_section_context_manager() -> None:
    builder = TermBuilder()
    with builder.section("Result") as b:
        assert b is builder
        assert builder.open_sections == 1
        b.append_text("ok")
    assert builder.open_sections == 0
    assert builder.finish().children == (Section("Result", (Text("ok"),)),)


def test_empty_section_is_kept() -> None:
    term: Term = TermBuilder().begin_section("empty").end_section().finish()
    assert term.children == (Section("empty"),)
    assert term.depth == 1


def test_end_section_without_open_section_raises() -> None:
    with pytest.raises(UnbalancedSectionError, match="no open section"):
        TermBuilder().append_text("x").end_section()


@parametrize("opened", [1, 3])
def test_finish_with_open_sections_raises(opened: int) -> None:
    builder = TermBuilder()
    for i in range(opened):
        builder.begin_section(f"s{i}")
    with pytest.raises(UnbalancedSectionError) as excinfo:
        builder.finish()
    assert excinfo.value.open_sections == opened
    assert f"{opened} open section(s)" in str(excinfo.value)


def test_attach_tag_before_any_node_raises() -> None:
    with pytest.raises(NoCurrentNodeError, match="before any node was appended"):
        TermBuilder().attach_tag(Tag.label("x"))


def test_attach_tag_targets_most_recent_node_in_order() -> None:
    first = Tag.label("first")
    second = Tag.source_location("main.rs", 42, 7)
    term: Term = (
        TermBuilder()
        .append_text("a")
        .append_text("b")
        .attach_tag(first)
        .attach_tag(second)
        .finish()
    )
    assert term.children == (Text("a"), Text("b", (first, second)))


def test_attach_tag_after_begin_section_tags_the_section() -> None:
    tag = Tag.label("sec")
    builder = TermBuilder()
    builder.begin_section("S").attach_tag(tag).append_text("child").end_section()
    assert builder.finish().children == (Section("S", (Text("child"),), (tag,)),)


def test_attach_tag_after_end_section_targets_last_appended_node() -> None:
    """Closing a section does not move the attach target back to the section."""
    tag = Tag.label("late")
    builder = TermBuilder()
    builder.begin_section("S").append_text("child").end_section().attach_tag(tag)
    assert builder.finish().children == (Section("S", (Text("child", (tag,)),)),)


def test_attach_tags_keeps_existing_node_tags() -> None:
    own = Tag.label("own")
    extra = Tag.label("extra")
    term: Term = TermBuilder().append_node(Text("x", (own,))).attach_tags([extra]).finish()
    assert term.children == (Text("x", (own, extra)),)


def test_finished_term_is_independent_of_builder() -> None:
    builder = TermBuilder().append_text("a")
    first: Term = builder.finish()
    builder.attach_tag(Tag.label("later")).append_text("b")
    second: Term = builder.finish()

    assert first.children == (Text("a"),)
    assert second.children == (Text("a", (Tag.label("later"),)), Text("b"))


def test_append_list_accepts_nodes_and_strings() -> None:
    nested = ListBlock((Text("inner"),))
    term: Term = TermBuilder().append_list(["a", nested]).finish()
    assert term.children == (ListBlock((Text("a"), nested)),)


@parametrize(
    "value, expected",
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (1.5, "1.5"),
        ("text", "text"),
    ],
)
def test_format_scalar(value: object, expected: str) -> None:
    assert format_scalar(value) == expected


def test_append_object_nests_mappings_and_sequences() -> None:
    value = {"a": 1, "b": [True, None], "c": {"d": "x"}}
    builder = TermBuilder().append_object("obj", value)
    term: Term = builder.finish()

    assert term.children == (
        Section(
            "obj",
            (
                Field("a", "1"),
                Section("b", (Field("[0]", "true"), Field("[1]", "null"))),
                Section("c", (Field("d", "x"),)),
            ),
        ),
    )
    assert builder.max_depth == 2


def test_append_object_scalar_is_a_field() -> None:
    assert TermBuilder().append_object("n", 5).finish().children == (Field("n", "5"),)


def test_append_object_dataclass_and_tag_target() -> None:
    @dataclass
    class Point:
        x: int
        y: int

    tag = Tag.label("pt")
    term: Term = TermBuilder().append_object("p", Point(1, 2)).attach_tag(tag).finish()
    assert term.children == (Section("p", (Field("x", "1"), Field("y", "2")), (tag,)),)


def test_styled_rejects_block_child() -> None:
    with pytest.raises(TypeError):
        Styled(Style.BOLD, Section("nope"))  # type: ignore[arg-type]


def test_term_walk_visits_every_node() -> None:
    term: Term = (
        TermBuilder()
        .begin_section("S")
        .append_text("a")
        .append_list(["b"])
        .end_section()
        .finish()
    )
    kinds: list[str] = [type(node).__name__ for node, _depth in term.walk()]
    assert kinds[:3] == ["Section", "Text", "ListBlock"]
    assert len(term) == len(kinds)
