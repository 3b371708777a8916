"""Unit tests for core/emit.py"""

import pytest

from mmformat.core.emit import diff_documents, emit_block, emit_document, emit_inline
from mmformat.core.models import (
    Bold,
    CodeBlock,
    Color,
    Document,
    ImageBlock,
    InlineImage,
    InlineText,
    ListBlock,
    MetaBlock,
    Symbol,
)
from mmformat.core.parse import parse


ROUND_TRIP_SOURCES = [
    "# Title with **bold** and *italic*",
    "## Sub :star:",
    "Para with `code`, _under_ and [LINK: Docs|app://docs].",
    "**a *b* c**",
    "> Quote with [IMAGE: pic|A cat] and [IMAGE: icon]",
    "- one\n- two\n- three",
    "1. first\n2. second",
    "- a\n## split\n- b",
    "---",
    "```\n  raw *text*\n# not a title\n```",
    "[META: version=1; author=Jo]",
    "[STYLE: font=serif]",
    "[LINK: Home|app://home]",
    "[IMAGE: banner]",
    "[SFSYM:hand.wave] hi",
    "**unterminated bold",
]


@pytest.mark.parametrize("source", ROUND_TRIP_SOURCES)
def test_round_trip_is_structural_fixed_point(source):
    """Re-parsing the emitted form yields an equal Document."""
    doc = parse(source)
    assert parse(emit_document(doc)) == doc


def test_round_trip_sample(sample_mm):
    doc = parse(sample_mm)
    assert parse(emit_document(doc)) == doc


def test_emit_document_canonical_form():
    doc = parse("[META: a=1]\n#  Hi\n- x\n- y\n1. z\n---")
    assert emit_document(doc) == (
        "[META: a=1]\n\n"
        "#  Hi\n\n"
        "- x\n- y\n\n"
        "1. z\n\n"
        "---\n"
    )


def test_emit_empty_document():
    assert emit_document(Document()) == ""


def test_emit_inline_forms():
    assert emit_inline(parse("**b** *i* _u_ `c` :s: [LINK: l|a]").blocks[0].inline) == (
        "**b** *i* _u_ `c` :s: [LINK: l|a]"
    )


def test_emit_color_keeps_children_only():
    assert emit_inline([Color(color="red", children=(Bold(children=(InlineText(text="x"),)),))]) == "**x**"


def test_emit_image_alt():
    assert emit_inline([InlineImage(name="p")]) == "[IMAGE: p]"
    assert emit_block(ImageBlock(name="p", alt="A")) == "[IMAGE: p|A]"


def test_emit_ordered_list_renumbers():
    block = ListBlock(items=((InlineText(text="a"),), (Symbol(name="b"),)), ordered=True)
    assert emit_block(block) == "1. a\n2. :b:"


def test_emit_meta_and_code():
    assert emit_block(MetaBlock(entries={"k": "v", "x": "y"})) == "[META: k=v; x=y]"
    assert emit_block(CodeBlock(code="a\nb")) == "```\na\nb\n```"


def test_emit_unknown_node_raises():
    with pytest.raises(TypeError):
        emit_block(InlineText(text="not a block"))


def test_diff_identical_documents_is_empty():
    assert diff_documents(parse("# A\n- x"), parse("  # A\n\n- x")) == []


def test_diff_reports_changed_lines():
    lines = diff_documents(parse("# A\n- x"), parse("# B\n- x"), from_label="v1", to_label="v2")
    assert lines[0].startswith("--- v1")
    assert "-# A\n" in lines
    assert "+# B\n" in lines
