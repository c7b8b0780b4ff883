"""Replace segments with the filesystem's own spelling, root outward.

Correct case only flows down while the path exists: once a prefix is missing,
every deeper segment is kept as given, since nothing inside a missing
directory can be looked up.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from app.pathcanon.platform.chars import WINDOWS_CHARS, CharTable
from app.pathcanon.platform.probe import PathProbe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RootDescriptor:
    drive_letter: str
    exists: bool


def join_segment(parent: str, segment: str, chars: CharTable = WINDOWS_CHARS) -> str:
    if parent.endswith(chars.directory_separator):
        return parent + segment
    return parent + chars.directory_separator + segment


def describe_root(root: str, probe: PathProbe, chars: CharTable = WINDOWS_CHARS) -> RootDescriptor:
    return RootDescriptor(drive_letter=root[:1], exists=_safe_exists(probe, root + chars.directory_separator))


def _safe_exists(probe: PathProbe, path: str) -> bool:
    try:
        return probe.exists(path)
    except OSError as exc:
        logger.debug("Probe failed for %s, treating as missing: %s", path, exc)
        return False


def _lookup(probe: PathProbe, parent: str, segment: str, chars: CharTable) -> Optional[str]:
    """Exact spelling of ``segment`` inside ``parent``, or None when it is missing."""
    try:
        return probe.exact_name(parent, segment)
    except OSError as exc:
        logger.debug("Name lookup failed for %s, keeping input case: %s", join_segment(parent, segment, chars), exc)
        return None


def resolve_case(segments: Sequence[str], probe: PathProbe, chars: CharTable = WINDOWS_CHARS) -> str:
    """Join ``segments`` into a path, correcting case for every existing prefix."""
    root = segments[0]
    resolved = root + chars.directory_separator
    probing = describe_root(root, probe, chars).exists
    if not probing:
        logger.debug("Drive %s is not present, skipping case lookups", root)

    for segment in segments[1:]:
        exact = _lookup(probe, resolved, segment, chars) if probing else None
        if exact is None:
            probing = False
            exact = segment
        resolved = join_segment(resolved, exact, chars)
    return resolved
