"""Document tree for MM markup: immutable block and inline nodes"""

from types import MappingProxyType
from typing import Annotated, Literal, Mapping, Optional, Sequence, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer


class Node(BaseModel):
    """Base for every tree node. Nodes are frozen once built."""
    model_config = ConfigDict(frozen=True)


# --- inline nodes ---

class InlineText(Node):
    type: Literal["text"] = "text"
    text: str

    @property
    def plain_text(self) -> str:
        return self.text


class Symbol(Node):
    """Named icon glyph, written `:name:` or `[SFSYM:name]`."""
    type: Literal["symbol"] = "symbol"
    name: str

    @property
    def plain_text(self) -> str:
        return f"[{self.name}]"


class Bold(Node):
    type: Literal["bold"] = "bold"
    children: tuple["Inline", ...] = ()

    @property
    def plain_text(self) -> str:
        return plain_text(self.children)


class Italic(Node):
    type: Literal["italic"] = "italic"
    children: tuple["Inline", ...] = ()

    @property
    def plain_text(self) -> str:
        return plain_text(self.children)


class Underline(Node):
    type: Literal["underline"] = "underline"
    children: tuple["Inline", ...] = ()

    @property
    def plain_text(self) -> str:
        return plain_text(self.children)


class Color(Node):
    """Colored span. The color value is opaque (e.g. '#ff0000', 'red')."""
    type: Literal["color"] = "color"
    color: str
    children: tuple["Inline", ...] = ()

    @property
    def plain_text(self) -> str:
        return plain_text(self.children)


class InlineCode(Node):
    type: Literal["code"] = "code"
    code: str

    @property
    def plain_text(self) -> str:
        return self.code


class InlineLink(Node):
    type: Literal["link"] = "link"
    label: str
    action: str

    @property
    def plain_text(self) -> str:
        return self.label


class InlineImage(Node):
    type: Literal["image"] = "image"
    name: str
    alt: Optional[str] = None

    @property
    def plain_text(self) -> str:
        return self.alt or ""


Inline = Annotated[
    Union[InlineText, Symbol, Bold, Italic, Underline, Color, InlineCode, InlineLink, InlineImage],
    Field(discriminator="type"),
]


def plain_text(inlines: Sequence[Node]) -> str:
    """Concatenate the plain-text projection of a sequence of inline nodes."""
    return "".join(i.plain_text for i in inlines)


# --- block nodes ---

class TitleBlock(Node):
    type: Literal["title"] = "title"
    inline: tuple[Inline, ...] = ()

    @property
    def summary(self) -> str:
        return f"TITLE: {plain_text(self.inline)}"


class SubtitleBlock(Node):
    type: Literal["subtitle"] = "subtitle"
    inline: tuple[Inline, ...] = ()

    @property
    def summary(self) -> str:
        return f"SUBTITLE: {plain_text(self.inline)}"


class TextBlock(Node):
    """Body paragraph; one per non-blank source line."""
    type: Literal["text"] = "text"
    inline: tuple[Inline, ...] = ()

    @property
    def summary(self) -> str:
        return f"TEXT: {plain_text(self.inline)}"


class ListBlock(Node):
    """Bullet (`- `) or numbered (`1. `) list; every item is an inline sequence."""
    type: Literal["list"] = "list"
    items: tuple[tuple[Inline, ...], ...] = ()
    ordered: bool = False

    @property
    def summary(self) -> str:
        prefix = "Ordered List" if self.ordered else "Unordered List"
        return f"{prefix} ({len(self.items)} items)"


class QuoteBlock(Node):
    type: Literal["quote"] = "quote"
    inline: tuple[Inline, ...] = ()

    @property
    def summary(self) -> str:
        return f"QUOTE: {plain_text(self.inline)}"


class CodeBlock(Node):
    """Verbatim fenced code; never inline-parsed."""
    type: Literal["code_block"] = "code_block"
    code: str

    @property
    def summary(self) -> str:
        return f"CODEBLOCK: {self.code[:20]}..."


class LinkBlock(Node):
    type: Literal["link"] = "link"
    label: str
    action: str

    @property
    def summary(self) -> str:
        return f"LINK: {self.label}"


class DividerBlock(Node):
    type: Literal["divider"] = "divider"

    @property
    def summary(self) -> str:
        return "DIVIDER"


class ImageBlock(Node):
    type: Literal["image"] = "image"
    name: str
    alt: Optional[str] = None

    @property
    def summary(self) -> str:
        return f"IMAGE: {self.name}"


# Key/value maps are read-only views after validation and dump as plain dicts.
FrozenEntries = Annotated[
    Mapping[str, str],
    AfterValidator(lambda v: MappingProxyType(dict(v))),
    PlainSerializer(dict, return_type=dict[str, str]),
]


class MetaBlock(Node):
    """Document metadata such as version or author."""
    type: Literal["meta"] = "meta"
    entries: FrozenEntries = Field(default_factory=dict, validate_default=True)

    @property
    def summary(self) -> str:
        return f"META: {dict(self.entries)}"


class StyleBlock(Node):
    """Presentation hints; opaque to the parser."""
    type: Literal["style"] = "style"
    entries: FrozenEntries = Field(default_factory=dict, validate_default=True)

    @property
    def summary(self) -> str:
        return f"STYLE: {dict(self.entries)}"


Block = Annotated[
    Union[
        TitleBlock, SubtitleBlock, TextBlock, ListBlock, QuoteBlock, CodeBlock,
        LinkBlock, DividerBlock, ImageBlock, MetaBlock, StyleBlock,
    ],
    Field(discriminator="type"),
]

INLINE_BLOCKS = (TitleBlock, SubtitleBlock, TextBlock, QuoteBlock)


class Document(Node):
    """Root of a parsed MM document: an ordered sequence of blocks."""
    blocks: tuple[Block, ...] = ()

    def summaries(self) -> list[str]:
        """Return one debug summary line per block, in document order."""
        return [b.summary for b in self.blocks]

    def plain_text(self) -> list[str]:
        """Return the plain text of each inline-bearing block and list item."""
        lines: list[str] = []
        for block in self.blocks:
            if isinstance(block, INLINE_BLOCKS):
                lines.append(plain_text(block.inline))
            elif isinstance(block, ListBlock):
                lines.extend(plain_text(item) for item in block.items)
        return lines


for _model in (Bold, Italic, Underline, Color):
    _model.model_rebuild()
