"""Parse entry points: text or files to Document, plus MM file discovery"""

import logging
from pathlib import Path

from mmformat.core.convert.blocks import parse_blocks
from mmformat.core.convert.inline import DEFAULT_MAX_DEPTH
from mmformat.core.models import Document


logger = logging.getLogger(__name__)

MM_EXTENSIONS = {'.mm'}


def parse(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Document:
    """Parse MM source into a Document. Total over all strings; never raises."""
    return Document(blocks=parse_blocks(text, max_depth))


def discover_files(path: Path) -> list[Path]:
    """Return sorted .mm files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MM_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MM_EXTENSIONS)


def read_source(path: Path, encoding: str = 'utf-8') -> str:
    """Read and decode a source file; decoding failures raise ValueError."""
    try:
        return path.read_bytes().decode(encoding)
    except UnicodeDecodeError as e:
        raise ValueError(f"Cannot decode {path} as {encoding}: {e}") from e
    except LookupError as e:
        raise ValueError(f"Unknown encoding {encoding!r}") from e


def parse_file(path: Path, encoding: str = 'utf-8', max_depth: int = DEFAULT_MAX_DEPTH) -> Document:
    """Read a single MM file and parse it."""
    text = read_source(path, encoding)
    logger.debug("parsing %s (%d chars)", path, len(text))
    return parse(text, max_depth)


def parse_dir(path: Path, encoding: str = 'utf-8', max_depth: int = DEFAULT_MAX_DEPTH) -> list[tuple[Path, Document]]:
    """Parse every .mm file under path (file or directory)."""
    return [(p, parse_file(p, encoding, max_depth)) for p in discover_files(path)]
