from __future__ import annotations


def escape_path_segment(segment: str) -> str:
    """Escape a single key segment for dot-path representation.

    - Dots are escaped as '\\.' so keys like 'gpt-3.5-turbo' remain one segment.
    - Backslashes are escaped as '\\\\' to preserve round-tripping.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    return segment.replace('\\', '\\\\').replace('.', '\\.')


def join_path(parent: str, key: str, sep: str = '.') -> str:
    """Append an object key to a root-relative dot path ('' is the root)."""
    escaped = escape_path_segment(key)
    return f"{parent}{sep}{escaped}" if parent else escaped
