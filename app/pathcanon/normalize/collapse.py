"""In-place segment collapsing. Index 0 (the drive root) is never touched."""

from __future__ import annotations

from typing import List


def remove_empty_segments(segments: List[str]) -> None:
    segments[1:] = [segment for segment in segments[1:] if segment != ""]


def remove_dot_segments(segments: List[str]) -> None:
    """Drop ``.`` segments, and ``..`` together with the segment before it.

    A ``..`` directly under the root only removes itself.
    """
    i = 1
    while i < len(segments):
        segment = segments[i]
        if segment == ".":
            del segments[i]
        elif segment == "..":
            if i > 1:
                del segments[i - 1:i + 1]
                i -= 1
            else:
                del segments[i]
        else:
            i += 1
