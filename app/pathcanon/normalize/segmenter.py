"""Split raw paths into segments and root them on a drive.

After ``resolve_root`` the first segment is always a two-character drive root
such as ``C:``, followed by an absolute chain of segments. Nothing here touches
the filesystem: a drive that does not exist is handled like one that does.
"""

from __future__ import annotations

import re
from typing import List, Optional

from app.pathcanon.platform.chars import WINDOWS_CHARS, CharTable

_WHITESPACE = re.compile(r"\s+")


def split_segments(path: Optional[str], chars: CharTable = WINDOWS_CHARS) -> Optional[List[str]]:
    """Split on either separator and trim each segment.

    Blank input yields ``[""]``.
    """
    if path is None:
        return None
    text = chars.unify_separators(path)
    return [segment.strip() for segment in text.split(chars.directory_separator)]


def resolve_root(segments: List[str], cwd: str, chars: CharTable = WINDOWS_CHARS) -> List[str]:
    """Return a copy of ``segments`` that starts with an upper-cased drive root.

    ``cwd`` is spliced in wherever the input under-specifies the path:

    - ``""``             -> the working directory itself
    - ``\\some\\path``   -> the working directory's drive, then ``some\\path``
    - ``C:``             -> the working directory below drive ``C:``
    - ``C:folder``       -> the working directory below ``C:``, then ``folder``
    - ``some\\path``     -> the working directory, then ``some\\path``
    """
    segments = list(segments)
    cwd_segments = cwd.split(chars.directory_separator)

    if not segments:
        return segments

    first = segments[0]
    if first == "":
        if len(segments) == 1:
            segments[0:1] = cwd_segments
        else:
            segments[0] = cwd_segments[0]
    else:
        compact = _WHITESPACE.sub("", first)
        # Non-letter drives like "1:" are legal, so only the separator is checked.
        if len(compact) > 1 and compact[1] == chars.volume_separator:
            if len(compact) == 2:
                segments[0] = compact
                if len(segments) == 1:
                    segments[1:1] = cwd_segments[1:]
            else:
                folder = first[first.index(chars.volume_separator) + 1:].strip()
                segments[1:1] = cwd_segments[1:] + [folder]
                segments[0] = compact[:2]
        else:
            # Dot and double-dot segments are kept for the collapser.
            segments[0:0] = cwd_segments

    segments[0] = segments[0].upper()
    return segments
