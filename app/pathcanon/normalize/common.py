"""Deepest shared directory of two normalized paths."""

from __future__ import annotations

from typing import Optional

from app.pathcanon.platform.chars import WINDOWS_CHARS, CharTable, fold_case


def directory_name(path: Optional[str], chars: CharTable = WINDOWS_CHARS) -> Optional[str]:
    """Parent of a normalized path; None for a bare root like ``C:\\``."""
    if path is None:
        return None
    sep = chars.directory_separator
    trimmed = path.rstrip(sep)
    index = trimmed.rfind(sep)
    if index < 0:
        return None
    parent = trimmed[:index]
    if sep not in parent:
        return parent + sep
    return parent


def common_ancestor(normalized_a: Optional[str], normalized_b: Optional[str], chars: CharTable = WINDOWS_CHARS) -> Optional[str]:
    """Walk up from ``normalized_a``'s directory until it prefixes ``normalized_b``'s.

    The prefix test ignores case and is purely textual, so ``C:\\ab`` counts
    as a prefix of ``C:\\abc``. Returns None when the paths sit on different
    drives.
    """
    path = directory_name(normalized_a, chars)
    other = directory_name(normalized_b, chars)
    if path is None or other is None:
        return None

    other_key = fold_case(other)
    while path is not None and not other_key.startswith(fold_case(path)):
        path = directory_name(path, chars)
    return path
