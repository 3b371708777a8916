"""Fluent API for building a Document without parsing MM text"""

from typing import Optional, Sequence, Union

from mmformat.core.models import (
    Block,
    Bold,
    CodeBlock,
    Color,
    DividerBlock,
    Document,
    ImageBlock,
    Inline,
    InlineCode,
    InlineImage,
    InlineLink,
    InlineText,
    Italic,
    LinkBlock,
    ListBlock,
    MetaBlock,
    QuoteBlock,
    StyleBlock,
    SubtitleBlock,
    Symbol,
    TextBlock,
    TitleBlock,
    Underline,
)


Content = Union[str, Inline, Sequence[Inline]]


def _inlines(content: Content) -> tuple[Inline, ...]:
    """Normalize a str, a single inline node, or a sequence of them to an inline tuple."""
    if isinstance(content, str):
        return (InlineText(text=content),)
    if isinstance(content, (list, tuple)):
        return tuple(content)
    return (content,)


# --- inline helpers ---

def text(value: str) -> InlineText:
    return InlineText(text=value)


def bold(*children: Content) -> Bold:
    return Bold(children=[i for c in children for i in _inlines(c)])


def italic(*children: Content) -> Italic:
    return Italic(children=[i for c in children for i in _inlines(c)])


def underline(*children: Content) -> Underline:
    return Underline(children=[i for c in children for i in _inlines(c)])


def color(value: str, *children: Content) -> Color:
    return Color(color=value, children=[i for c in children for i in _inlines(c)])


def code(value: str) -> InlineCode:
    return InlineCode(code=value)


def link(label: str, action: str) -> InlineLink:
    return InlineLink(label=label, action=action)


def symbol(name: str) -> Symbol:
    return Symbol(name=name)


def image(name: str, alt: Optional[str] = None) -> InlineImage:
    return InlineImage(name=name, alt=alt)


class DocumentBuilder:
    """Accumulates blocks in call order; every add_* returns the builder for chaining.

    >>> doc = DocumentBuilder().add_title("Hello").add_text(["Hi ", bold("there")]).build()
    """

    def __init__(self) -> None:
        self._blocks: list[Block] = []

    def _add(self, block: Block) -> "DocumentBuilder":
        self._blocks.append(block)
        return self

    def add_title(self, content: Content) -> "DocumentBuilder":
        return self._add(TitleBlock(inline=_inlines(content)))

    def add_subtitle(self, content: Content) -> "DocumentBuilder":
        return self._add(SubtitleBlock(inline=_inlines(content)))

    def add_text(self, content: Content) -> "DocumentBuilder":
        return self._add(TextBlock(inline=_inlines(content)))

    def add_list(self, items: Sequence[Content], ordered: bool = False) -> "DocumentBuilder":
        return self._add(ListBlock(items=[_inlines(i) for i in items], ordered=ordered))

    def add_quote(self, content: Content) -> "DocumentBuilder":
        return self._add(QuoteBlock(inline=_inlines(content)))

    def add_code_block(self, code: str) -> "DocumentBuilder":
        return self._add(CodeBlock(code=code))

    def add_link(self, label: str, action: str) -> "DocumentBuilder":
        return self._add(LinkBlock(label=label, action=action))

    def add_divider(self) -> "DocumentBuilder":
        return self._add(DividerBlock())

    def add_image(self, name: str, alt: Optional[str] = None) -> "DocumentBuilder":
        return self._add(ImageBlock(name=name, alt=alt))

    def add_meta(self, entries: dict[str, str]) -> "DocumentBuilder":
        return self._add(MetaBlock(entries=dict(entries)))

    def add_style(self, entries: dict[str, str]) -> "DocumentBuilder":
        return self._add(StyleBlock(entries=dict(entries)))

    def build(self) -> Document:
        """Return a Document snapshot; later add_* calls do not affect it."""
        return Document(blocks=list(self._blocks))
