# topmark:header:start
#
#   project      : Termprint
#   file         : test_file.py
#   file_relpath : tests/rendering/test_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Golden-output tests for the plain-text File backend."""

from __future__ import annotations

from datetime import datetime, timezone

from termprint.rendering.backends import Backend
from termprint.term.builder import TermBuilder
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
from tests.conftest import make_term, render

FILE = Backend.FILE


def test_section_with_text_and_code_block() -> None:
    term = make_term(Section("Result", (Text("ok"), CodeBlock("json", "{}"))))
    assert render(term, FILE) == "Result:\n  ok\n  ```json\n  {}\n  ```\n"


def test_empty_term_renders_nothing() -> None:
    assert render(make_term(), FILE) == ""


def test_source_location_tag_precedes_node() -> None:
    term = make_term(Text("hello", (Tag.source_location("main.rs", 42, 7),)))
    assert render(term, FILE) == "main.rs:42:7\nhello\n"


def test_tags_render_in_attachment_order() -> None:
    term = (
        TermBuilder()
        .append_text("hello")
        .attach_tag(Tag.label("test tagging"))
        .attach_tag(Tag.timestamp(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)))
        .attach_tag(Tag.source_location("main.rs", 42))
        .finish()
    )
    assert render(term, FILE) == "[test tagging]\n2024-01-02T03:04:05Z\nmain.rs:42\nhello\n"


def test_nested_sections_indent_children() -> None:
    term = make_term(Section("A", (Section("B", (Text("x"),)),)), Text("after"))
    assert render(term, FILE) == "A:\n  B:\n    x\nafter\n"


def test_tags_of_nested_nodes_are_indented_with_them() -> None:
    term = make_term(Section("A", (Text("x", (Tag.label("l"),)),)))
    assert render(term, FILE) == "A:\n  [l]\n  x\n"


def test_styles_are_dropped() -> None:
    term = make_term(Styled(Style.BOLD, Styled(Style.RED, Text("hi"))))
    assert render(term, FILE, color=True) == "hi\n"


def test_multiline_text_is_indented_per_line() -> None:
    term = make_term(Section("S", (Text("a\n\nb"),)))
    assert render(term, FILE) == "S:\n  a\n\n  b\n"


def test_lists() -> None:
    assert render(make_term(ListBlock((Text("a"), Text("b")))), FILE) == "- a\n- b\n"
    assert render(make_term(ListBlock((Text("a"), Text("b")), ordered=True)), FILE) == (
        "1. a\n2. b\n"
    )


def test_nested_list_goes_one_level_deeper_and_keeps_numbering() -> None:
    term = make_term(ListBlock((Text("a"), ListBlock((Text("b"),)), Text("c")), ordered=True))
    assert render(term, FILE) == "1. a\n  - b\n2. c\n"


def test_list_inside_section_and_multiline_item() -> None:
    term = make_term(Section("S", (ListBlock((Text("one\ntwo"), Text(""))),)))
    assert render(term, FILE) == "S:\n  - one\n    two\n  -\n"


def test_list_item_tags_precede_marker() -> None:
    term = make_term(ListBlock((Text("a", (Tag.label("x"),)),)))
    assert render(term, FILE) == "[x]\n- a\n"


def test_fields() -> None:
    term = make_term(Field("name", "value"), Field("empty", ""), Field("multi", "a\nb"))
    assert render(term, FILE) == "name: value\nempty:\nmulti: a\n  b\n"


def test_code_block_variants() -> None:
    assert render(make_term(CodeBlock(None, "")), FILE) == "```\n```\n"
    assert render(make_term(CodeBlock(None, "x\n")), FILE) == "```\nx\n```\n"
    assert render(make_term(CodeBlock("md", "a ``` b")), FILE) == "````md\na ``` b\n````\n"


def test_object_printing() -> None:
    value = {"a": 1, "b": [True, None], "c": {"d": "x"}}
    term = TermBuilder().append_object("obj", value).finish()
    assert render(term, FILE) == (
        "obj:\n  a: 1\n  b:\n    [0]: true\n    [1]: null\n  c:\n    d: x\n"
    )


def test_empty_section() -> None:
    assert render(make_term(Section("Nothing")), FILE) == "Nothing:\n"
