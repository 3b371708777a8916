"""Parsing helpers for bracketed tag interiors shared by block and inline rules"""

from typing import Optional


def split_tag(line: str, prefix: str) -> Optional[str]:
    """Return the interior of a `[PREFIX...]` line, or None if it is not one."""
    if line.startswith(prefix) and line.endswith("]"):
        return line[len(prefix):-1]
    return None


def parse_pairs(content: str) -> dict[str, str]:
    """Parse `key=value; key=value` into a dict.

    A pair survives only if it splits into exactly two non-empty sides on '='.
    Later duplicates of a key win.
    """
    entries: dict[str, str] = {}
    for pair in content.split(";"):
        parts = [p.strip() for p in pair.split("=")]
        if len(parts) == 2 and all(parts):
            entries[parts[0]] = parts[1]
    return entries


def parse_link(content: str) -> Optional[tuple[str, str]]:
    """Parse `label|action`; anything but exactly one '|' between non-empty sides is malformed."""
    parts = [p.strip() for p in content.split("|")]
    if len(parts) != 2 or not all(parts):
        return None
    return parts[0], parts[1]


def parse_image(content: str) -> Optional[tuple[str, Optional[str]]]:
    """Parse `name|alt` or a bare `name` (alt absent). The name must be non-empty."""
    parts = [p.strip() for p in content.split("|")]
    if len(parts) > 2 or not parts[0]:
        return None
    return parts[0], (parts[1] if len(parts) == 2 else None)
