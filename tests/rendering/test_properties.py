# topmark:header:start
#
#   project      : Termprint
#   file         : test_properties.py
#   file_relpath : tests/rendering/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property-based tests for rendering.

Covers determinism, the plain-terminal/File equivalence, tag ordering,
section nesting, buffered vs. streamed output and builder depth tracking.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from hypothesis import given, settings
from hypothesis import strategies as st

from termprint.rendering.api import Renderer
from termprint.rendering.backends import Backend, Capabilities
from termprint.term.builder import TermBuilder
from termprint.term.nodes import Section, Text
from termprint.term.serializers import term_from_dict, term_to_dict
from termprint.term.tags import Tag
from tests.conftest import make_term, mark_hypothesis_slow
from tests.strategies_termprint import s_term

if TYPE_CHECKING:
    from termprint.term.nodes import Node, Term

BACKENDS: list[Backend] = list(Backend)


@given(term=s_term(), backend=st.sampled_from(BACKENDS), color=st.booleans())
@settings(max_examples=75, deadline=None)
def test_rendering_is_deterministic(term: Term, backend: Backend, color: bool) -> None:
    renderer = Renderer(backend, Capabilities(color=color))
    assert renderer.render(term) == renderer.render(term)


@given(term=s_term())
@settings(max_examples=75, deadline=None)
def test_terminal_without_color_equals_file(term: Term) -> None:
    plain = Renderer(Backend.TERMINAL, Capabilities(color=False))
    assert plain.render(term) == Renderer(Backend.FILE).render(term)


@given(term=s_term(), backend=st.sampled_from(BACKENDS))
@settings(max_examples=50, deadline=None)
def test_streamed_output_equals_buffered(term: Term, backend: Backend) -> None:
    renderer = Renderer(backend)
    stream = io.StringIO()
    renderer.render_to(term, stream)
    assert stream.getvalue() == renderer.render(term)


@given(term=s_term(), backend=st.sampled_from(BACKENDS))
@settings(max_examples=50, deadline=None)
def test_nonempty_output_ends_with_newline(term: Term, backend: Backend) -> None:
    out: str = Renderer(backend).render(term)
    assert out == "" or out.endswith("\n")
    if term.is_empty:
        assert out == ""


@given(
    labels=st.lists(
        st.from_regex(r"[a-z]{1,8}", fullmatch=True), min_size=1, max_size=6, unique=True
    )
)
@settings(max_examples=50, deadline=None)
def test_tags_render_in_attachment_order_before_node(labels: list[str]) -> None:
    builder = TermBuilder().append_text("BODY")
    for label in labels:
        builder.attach_tag(Tag.label(label))
    term: Term = builder.finish()

    file_lines: list[str] = Renderer(Backend.FILE).render(term).splitlines()
    assert file_lines == [f"[{label}]" for label in labels] + ["BODY"]

    md_blocks: list[str] = Renderer(Backend.MARKDOWN).render(term).split("\n\n")
    assert md_blocks == [f"`{label}`" for label in labels] + ["BODY\n"]


def _nested(depth: int) -> Node:
    node: Node = Text("x")
    for level in range(depth, 0, -1):
        node = Section(f"s{level}", (node,))
    return node


@given(depth=st.integers(min_value=1, max_value=10), cap=st.integers(min_value=1, max_value=6))
@settings(max_examples=50, deadline=None)
def test_section_nesting(depth: int, cap: int) -> None:
    term: Term = make_term(_nested(depth))
    assert term.depth == depth

    file_lines: list[str] = Renderer(Backend.FILE).render(term).splitlines()
    for level in range(1, depth + 1):
        assert file_lines[level - 1] == "  " * (level - 1) + f"s{level}:"
    assert file_lines[-1] == "  " * depth + "x"

    md = Renderer(Backend.MARKDOWN, Capabilities(max_heading_level=cap)).render(term)
    headings: list[str] = [line for line in md.splitlines() if line.startswith("#")]
    assert headings == ["#" * min(level, cap) + f" s{level}" for level in range(1, depth + 1)]


@given(ops=st.lists(st.booleans(), max_size=30))
@settings(max_examples=75, deadline=None)
def test_builder_depth_matches_deepest_nesting(ops: list[bool]) -> None:
    """True opens a section, False appends text (or closes when one is open)."""
    builder = TermBuilder()
    open_count: int = 0
    deepest: int = 0
    for begin in ops:
        if begin:
            builder.begin_section("s")
            open_count += 1
            deepest = max(deepest, open_count)
        elif open_count:
            builder.end_section()
            open_count -= 1
        else:
            builder.append_text("t")
    for _ in range(open_count):
        builder.end_section()

    term: Term = builder.finish()
    assert builder.max_depth == deepest
    assert term.depth == deepest


@mark_hypothesis_slow
@given(term=s_term())
@settings(max_examples=500, deadline=None)
def test_dict_form_preserves_rendering(term: Term) -> None:
    rebuilt: Term = term_from_dict(term_to_dict(term))
    for backend in BACKENDS:
        renderer = Renderer(backend)
        assert renderer.render(rebuilt) == renderer.render(term)
