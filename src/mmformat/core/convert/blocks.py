"""Line classifier: one forward pass over source lines producing block nodes"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from mmformat.core.convert.inline import DEFAULT_MAX_DEPTH, parse_inline
from mmformat.core.convert.tags import parse_image, parse_link, parse_pairs, split_tag
from mmformat.core.models import (
    Block,
    CodeBlock,
    DividerBlock,
    ImageBlock,
    LinkBlock,
    ListBlock,
    MetaBlock,
    QuoteBlock,
    StyleBlock,
    SubtitleBlock,
    TextBlock,
    TitleBlock,
)


logger = logging.getLogger(__name__)

FENCE = "```"
DIVIDER = "---"
ORDERED_RE = re.compile(r'^\d+\. ')

# Simple prefix rules in precedence order: (prefix, block type).
PREFIX_BLOCKS = (
    ("# ",  TitleBlock),
    ("## ", SubtitleBlock),
    ("> ",  QuoteBlock),
)


@dataclass
class _LineState:
    """Cross-line state threaded through the classifier loop."""
    blocks: list[Block] = field(default_factory=list)
    fence:  Optional[list[str]] = None      # open code fence buffer; None when closed
    items:  list[tuple] = field(default_factory=list)   # pending items of the open list
    ordered: bool = False


def _flush_list(state: _LineState) -> None:
    """Close the open list, if any, as a single ListBlock."""
    if state.items:
        state.blocks.append(ListBlock(items=tuple(state.items), ordered=state.ordered))
        state.items = []


def _emit(state: _LineState, block: Block) -> None:
    _flush_list(state)
    state.blocks.append(block)


def _append_item(state: _LineState, item: tuple, ordered: bool) -> None:
    """Extend the open list if it has the same kind, else start a new one."""
    if state.items and state.ordered != ordered:
        _flush_list(state)
    state.ordered = ordered
    state.items.append(item)


def _tag_block(line: str) -> tuple[bool, Optional[Block]]:
    """Classify a bracketed tag line. Returns (matched, block); a matched line may yield no block."""
    if (content := split_tag(line, "[META:")) is not None:
        return True, MetaBlock(entries=parse_pairs(content))
    if (content := split_tag(line, "[STYLE:")) is not None:
        return True, StyleBlock(entries=parse_pairs(content))
    if (content := split_tag(line, "[LINK:")) is not None:
        link = parse_link(content)
        if link is None:
            logger.debug("dropping malformed LINK tag: %r", line)
            return True, None
        return True, LinkBlock(label=link[0], action=link[1])
    if (content := split_tag(line, "[IMAGE:")) is not None:
        image = parse_image(content)
        if image is None:
            logger.debug("dropping malformed IMAGE tag: %r", line)
            return True, None
        return True, ImageBlock(name=image[0], alt=image[1])
    return False, None


def _classify(state: _LineState, line: str, max_depth: int) -> None:
    """Apply the first matching block rule to a trimmed, non-blank line."""
    for prefix, block_type in PREFIX_BLOCKS:
        if line.startswith(prefix):
            _emit(state, block_type(inline=parse_inline(line[len(prefix):], max_depth)))
            return

    if line == DIVIDER:
        _emit(state, DividerBlock())
        return

    matched, block = _tag_block(line)
    if matched:
        if block is not None:
            _emit(state, block)
        return

    if line.startswith("- "):
        _append_item(state, parse_inline(line[2:], max_depth), ordered=False)
        return

    if m := ORDERED_RE.match(line):
        _append_item(state, parse_inline(line[m.end():], max_depth), ordered=True)
        return

    _emit(state, TextBlock(inline=parse_inline(line, max_depth)))


def parse_blocks(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Block]:
    """Split text on newlines and classify each line into blocks.

    A line of exactly three backticks toggles verbatim capture; captured lines
    keep their original whitespace. An unterminated fence is flushed at the end.
    """
    state = _LineState()

    for raw in text.split("\n"):
        line = raw.strip()

        if line == FENCE:
            if state.fence is None:
                state.fence = []
            else:
                _emit(state, CodeBlock(code="\n".join(state.fence)))
                state.fence = None
            continue

        if state.fence is not None:
            state.fence.append(raw)
            continue

        if not line:
            continue

        _classify(state, line, max_depth)

    if state.fence is not None:
        logger.debug("unterminated code fence; flushing %d line(s)", len(state.fence))
        _emit(state, CodeBlock(code="\n".join(state.fence)))

    _flush_list(state)
    return state.blocks
