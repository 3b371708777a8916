"""Serialize a Document back to MM source, and diff documents by their canonical form"""

import difflib
from typing import Mapping, Sequence

from mmformat.core.models import (
    Bold,
    CodeBlock,
    Color,
    DividerBlock,
    Document,
    ImageBlock,
    InlineCode,
    InlineImage,
    InlineLink,
    InlineText,
    Italic,
    LinkBlock,
    ListBlock,
    MetaBlock,
    Node,
    QuoteBlock,
    StyleBlock,
    SubtitleBlock,
    Symbol,
    TextBlock,
    TitleBlock,
    Underline,
)


def _image_tag(name: str, alt: str | None) -> str:
    return f"[IMAGE: {name}|{alt}]" if alt is not None else f"[IMAGE: {name}]"


def _pairs_tag(prefix: str, entries: Mapping[str, str]) -> str:
    return f"[{prefix}: " + "; ".join(f"{k}={v}" for k, v in entries.items()) + "]"


def emit_inline(inlines: Sequence[Node]) -> str:
    """Render inline nodes as MM markup. Color has no markup form; only its children are kept."""
    parts: list[str] = []
    for node in inlines:
        if isinstance(node, InlineText):
            parts.append(node.text)
        elif isinstance(node, Bold):
            parts.append(f"**{emit_inline(node.children)}**")
        elif isinstance(node, Italic):
            parts.append(f"*{emit_inline(node.children)}*")
        elif isinstance(node, Underline):
            parts.append(f"_{emit_inline(node.children)}_")
        elif isinstance(node, Color):
            parts.append(emit_inline(node.children))
        elif isinstance(node, InlineCode):
            parts.append(f"`{node.code}`")
        elif isinstance(node, InlineLink):
            parts.append(f"[LINK: {node.label}|{node.action}]")
        elif isinstance(node, InlineImage):
            parts.append(_image_tag(node.name, node.alt))
        elif isinstance(node, Symbol):
            parts.append(f":{node.name}:")
        else:
            raise TypeError(f"Unknown inline node: {type(node).__name__}")
    return "".join(parts)


def emit_block(block: Node) -> str:
    """Render a single block as one or more MM source lines."""
    if isinstance(block, TitleBlock):
        return f"# {emit_inline(block.inline)}"
    if isinstance(block, SubtitleBlock):
        return f"## {emit_inline(block.inline)}"
    if isinstance(block, TextBlock):
        return emit_inline(block.inline)
    if isinstance(block, QuoteBlock):
        return f"> {emit_inline(block.inline)}"
    if isinstance(block, ListBlock):
        return "\n".join(
            f"{n}. {emit_inline(item)}" if block.ordered else f"- {emit_inline(item)}"
            for n, item in enumerate(block.items, start=1)
        )
    if isinstance(block, CodeBlock):
        return f"```\n{block.code}\n```"
    if isinstance(block, LinkBlock):
        return f"[LINK: {block.label}|{block.action}]"
    if isinstance(block, DividerBlock):
        return "---"
    if isinstance(block, ImageBlock):
        return _image_tag(block.name, block.alt)
    if isinstance(block, MetaBlock):
        return _pairs_tag("META", block.entries)
    if isinstance(block, StyleBlock):
        return _pairs_tag("STYLE", block.entries)
    raise TypeError(f"Unknown block node: {type(block).__name__}")


def emit_document(doc: Document) -> str:
    """Return canonical MM source for doc: blocks separated by one blank line."""
    body = "\n\n".join(emit_block(b) for b in doc.blocks)
    return f"{body}\n" if body else ""


def diff_documents(
    old: Document,
    new: Document,
    from_label: str = "old",
    to_label: str = "new",
    context: int = 3,
    ) -> list[str]:
    """Return unified diff lines between the canonical forms of two documents. Empty if identical."""
    old_lines = emit_document(old).splitlines(keepends=True)
    new_lines = emit_document(new).splitlines(keepends=True)
    return list(
        difflib.unified_diff(old_lines, new_lines, fromfile=from_label, tofile=to_label, n=context)
    )
