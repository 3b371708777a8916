"""Unit tests for core/builder.py"""

from mmformat.core.builder import (
    DocumentBuilder,
    bold,
    code,
    color,
    image,
    italic,
    link,
    symbol,
    text,
    underline,
)
from mmformat.core.emit import emit_document
from mmformat.core.models import (
    Bold,
    CodeBlock,
    Color,
    DividerBlock,
    ImageBlock,
    InlineText,
    Italic,
    LinkBlock,
    ListBlock,
    MetaBlock,
    QuoteBlock,
    StyleBlock,
    SubtitleBlock,
    TextBlock,
    TitleBlock,
)
from mmformat.core.parse import parse


def test_builder_adds_every_block_in_order():
    doc = (
        DocumentBuilder()
        .add_meta({"version": "1"})
        .add_style({"font": "serif"})
        .add_title("Hello")
        .add_subtitle(["Sub ", symbol("star")])
        .add_text(bold("strong"))
        .add_list(["a", [text("b"), italic("c")]], ordered=True)
        .add_quote("quoted")
        .add_code_block("x = 1")
        .add_link("Docs", "app://docs")
        .add_divider()
        .add_image("pic", alt="A cat")
        .build()
    )
    assert [type(b) for b in doc.blocks] == [
        MetaBlock, StyleBlock, TitleBlock, SubtitleBlock, TextBlock, ListBlock,
        QuoteBlock, CodeBlock, LinkBlock, DividerBlock, ImageBlock,
    ]
    assert doc.blocks[2] == TitleBlock(inline=(InlineText(text="Hello"),))
    assert doc.blocks[4].inline == (Bold(children=(InlineText(text="strong"),)),)
    assert doc.blocks[5].items[1] == (InlineText(text="b"), Italic(children=(InlineText(text="c"),)))
    assert doc.blocks[10] == ImageBlock(name="pic", alt="A cat")


def test_inline_helpers_flatten_mixed_content():
    node = underline("a ", [bold("b"), code("c")], link("l", "act"), image("i"))
    assert node.plain_text == "a bcl"


def test_color_helper():
    node = color("#00ff00", "go")
    assert node == Color(color="#00ff00", children=(InlineText(text="go"),))


def test_build_returns_snapshot():
    builder = DocumentBuilder().add_divider()
    first = builder.build()
    builder.add_divider()
    assert len(first.blocks) == 1
    assert len(builder.build().blocks) == 2


def test_built_document_round_trips_through_markup():
    doc = (
        DocumentBuilder()
        .add_title(["Intro ", bold("now")])
        .add_list(["x", "y"])
        .add_link("Go", "app://go")
        .build()
    )
    assert parse(emit_document(doc)) == doc
