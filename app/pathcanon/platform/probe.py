"""Filesystem probes used for case correction.

A probe answers two questions about drive-rooted paths: does an entry exist,
and how is its name actually spelled. Lookups are case-insensitive, matching
Windows semantics even when the host filesystem is case-sensitive.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Protocol

from app.pathcanon.platform.chars import WINDOWS_CHARS, CharTable, fold_case
from app.pathcanon.platform.drives import DriveMap, split_path


class PathProbe(Protocol):
    def exists(self, path: str) -> bool:
        ...

    def exact_name(self, parent: str, name: str) -> Optional[str]:
        ...


def _pick_name(names: Iterable[str], name: str) -> Optional[str]:
    wanted = fold_case(name)
    matches = sorted(n for n in names if fold_case(n) == wanted)
    if not matches:
        return None
    # Prefer an exact spelling on case-sensitive hosts with several candidates.
    return name if name in matches else matches[0]


class LocalPathProbe:
    """Probe the host filesystem through a DriveMap."""

    def __init__(self, drive_map: Optional[DriveMap] = None, chars: CharTable = WINDOWS_CHARS) -> None:
        self.drive_map = drive_map or DriveMap.default()
        self.chars = chars

    def exists(self, path: str) -> bool:
        parts = split_path(path, self.chars)
        if len(parts) <= 1:
            host = self.drive_map.to_host(path)
            return host is not None and os.path.isdir(host)
        sep = self.chars.directory_separator
        parent = sep.join(parts[:-1]) + sep
        return self.exact_name(parent, parts[-1]) is not None

    def exact_name(self, parent: str, name: str) -> Optional[str]:
        host_parent = self.drive_map.to_host(parent)
        if host_parent is None:
            return None
        with os.scandir(host_parent) as entries:
            return _pick_name((entry.name for entry in entries), name)


class MemoryPathProbe:
    """In-memory, case-insensitive set of drive-rooted paths."""

    def __init__(self, paths: Iterable[str] = (), chars: CharTable = WINDOWS_CHARS) -> None:
        self.chars = chars
        # case-folded key -> exact-case final segment
        self._entries: Dict[str, str] = {}
        for path in paths:
            self.add(path)

    def _key(self, parts: list[str]) -> str:
        return fold_case(self.chars.directory_separator.join(parts))

    def add(self, path: str) -> None:
        parts = split_path(path, self.chars)
        if not parts:
            raise ValueError(f"cannot register an empty path: {path!r}")
        parts[0] = parts[0].upper()
        for i in range(1, len(parts) + 1):
            self._entries.setdefault(self._key(parts[:i]), parts[i - 1])

    def exists(self, path: str) -> bool:
        return self._key(split_path(path, self.chars)) in self._entries

    def exact_name(self, parent: str, name: str) -> Optional[str]:
        return self._entries.get(self._key(split_path(parent, self.chars) + [name]))
