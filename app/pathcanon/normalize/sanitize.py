"""Strip characters Windows does not allow in path segments."""

from __future__ import annotations

from typing import List

from app.pathcanon.platform.chars import WINDOWS_CHARS, CharTable


def sanitize_segment(segment: str, chars: CharTable = WINDOWS_CHARS) -> str:
    """Remove invalid characters and the volume separator, then trailing dots.

    Windows ignores trailing dots and the whitespace in front of them, so
    ``"name . ."`` becomes ``"name"``. The result may be empty.
    """
    removed = chars.invalid_path_chars | {chars.volume_separator}
    cleaned = "".join(ch for ch in segment if ch not in removed).strip()
    while cleaned.endswith("."):
        cleaned = cleaned.rstrip(".").rstrip()
    return cleaned


def sanitize_segments(segments: List[str], chars: CharTable = WINDOWS_CHARS) -> None:
    for i in range(1, len(segments)):
        segments[i] = sanitize_segment(segments[i], chars)
