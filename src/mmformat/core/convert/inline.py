"""Character-level tokenizer turning a line of MM text into inline nodes"""

import logging
from typing import Optional

from mmformat.core.convert.tags import parse_image, parse_link
from mmformat.core.models import (
    Bold,
    Inline,
    InlineCode,
    InlineImage,
    InlineLink,
    InlineText,
    Italic,
    Symbol,
    Underline,
)


logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64

# Single-character span delimiters, checked after '**'.
SPAN_TYPES = {"*": Italic, "_": Underline}


def _extract(text: str, start: int, delimiter: str) -> tuple[str, int]:
    """Return (content, next_index) up to the next delimiter; unterminated spans run to the end."""
    end = text.find(delimiter, start)
    if end == -1:
        return text[start:], len(text)
    return text[start:end], end + len(delimiter)


def _bracket_tag(inside: str) -> Optional[Inline]:
    """Map a `[...]` interior to an inline node, or None to fall through to literal text."""
    if inside.startswith("LINK:"):
        link = parse_link(inside[5:])
        return InlineLink(label=link[0], action=link[1]) if link else None
    if inside.startswith("IMAGE:"):
        image = parse_image(inside[6:])
        return InlineImage(name=image[0], alt=image[1]) if image else None
    if inside.startswith("SFSYM:"):
        return Symbol(name=inside[6:].strip())
    return None


def parse_inline(text: str, max_depth: int = DEFAULT_MAX_DEPTH, _depth: int = 0) -> tuple[Inline, ...]:
    """Tokenize text into inline nodes, recursing into bold/italic/underline spans.

    Never raises. Once `max_depth` nested spans are open, the remaining text is
    kept as a single InlineText.
    """
    if _depth >= max_depth:
        logger.debug("inline nesting cap %d reached; keeping %r as text", max_depth, text)
        return (InlineText(text=text),) if text else ()

    result: list[Inline] = []
    buffer: list[str] = []
    i = 0

    def flush() -> None:
        if buffer:
            result.append(InlineText(text="".join(buffer)))
            buffer.clear()

    while i < len(text):
        ch = text[i]

        if text.startswith("**", i):
            flush()
            content, i = _extract(text, i + 2, "**")
            result.append(Bold(children=parse_inline(content, max_depth, _depth + 1)))
            continue

        if ch in SPAN_TYPES:
            flush()
            content, i = _extract(text, i + 1, ch)
            result.append(SPAN_TYPES[ch](children=parse_inline(content, max_depth, _depth + 1)))
            continue

        if ch == "`":
            flush()
            content, i = _extract(text, i + 1, "`")
            result.append(InlineCode(code=content))
            continue

        if ch == "[" and (close := text.find("]", i + 1)) != -1:
            if (node := _bracket_tag(text[i + 1:close])) is not None:
                flush()
                result.append(node)
                i = close + 1
                continue

        if ch == ":" and (close := text.find(":", i + 1)) != -1:
            flush()
            result.append(Symbol(name=text[i + 1:close]))
            i = close + 1
            continue

        buffer.append(ch)
        i += 1

    flush()
    return tuple(result)
