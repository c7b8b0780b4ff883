"""Drive-letter mapping between Windows-style paths and the host filesystem.

The normalizer always works on drive-rooted paths (``C:\\some\\path``). On a
Windows host those are real paths already. Elsewhere a drive map says which
host directory each drive letter stands for, much like a dosdevices folder.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from app.pathcanon.platform.chars import WINDOWS_CHARS, CharTable


def split_path(path: str, chars: CharTable) -> list[str]:
    text = chars.unify_separators(path)
    return [part for part in text.split(chars.directory_separator) if part]


class DriveMap:
    def __init__(
        self,
        mappings: Optional[Mapping[str, str]] = None,
        *,
        native: bool = False,
        chars: CharTable = WINDOWS_CHARS,
    ) -> None:
        self.mappings: Dict[str, str] = {}
        for letter, root in (mappings or {}).items():
            letter = letter.strip().rstrip(chars.volume_separator).upper()
            if len(letter) != 1:
                raise ValueError(f"drive letter must be a single character: {letter!r}")
            self.mappings[letter] = str(root)
        self.native = native
        self.chars = chars

    @classmethod
    def default(cls) -> "DriveMap":
        if os.name == "nt":
            return cls(native=True)
        return cls({"C": "/"})

    def __repr__(self) -> str:
        return f"DriveMap({self.mappings!r}, native={self.native})"

    def to_host(self, path: str) -> Optional[str]:
        """Translate a drive-rooted path to a host path, or None if the drive is unknown."""
        parts = split_path(path, self.chars)
        if not parts or len(parts[0]) != 2 or parts[0][1] != self.chars.volume_separator:
            return None
        letter = parts[0][0].upper()
        root = self.mappings.get(letter)
        if root is not None:
            return os.path.join(root, *parts[1:])
        if self.native:
            return parts[0] + self.chars.directory_separator + self.chars.directory_separator.join(parts[1:])
        return None

    def from_host(self, host_path: str) -> Optional[str]:
        """Translate a host path back to a drive-rooted path."""
        candidate = Path(host_path)
        best: Optional[tuple[int, str, Path]] = None
        for letter, root in self.mappings.items():
            root_path = Path(root)
            try:
                rel = candidate.relative_to(root_path)
            except ValueError:
                continue
            depth = len(root_path.parts)
            if best is None or depth > best[0]:
                best = (depth, letter, rel)

        if best is not None:
            _, letter, rel = best
            sep = self.chars.directory_separator
            return letter + self.chars.volume_separator + sep + sep.join(rel.parts)
        if self.native:
            return host_path
        return None


class ProcessWorkingDirectory:
    """The process working directory, expressed through a drive map."""

    def __init__(self, drive_map: Optional[DriveMap] = None) -> None:
        self.drive_map = drive_map or DriveMap.default()

    def __call__(self) -> str:
        host_cwd = os.getcwd()
        cwd = self.drive_map.from_host(host_cwd)
        if cwd is None:
            raise ValueError(f"working directory {host_cwd!r} is not under any mapped drive")
        return cwd


class FixedWorkingDirectory:
    """A configured working directory, such as ``C:\\work``."""

    def __init__(self, path: str, chars: CharTable = WINDOWS_CHARS) -> None:
        text = chars.unify_separators(path.strip())
        sep = chars.directory_separator
        if len(text) < 2 or text[1] != chars.volume_separator or text[0] in chars.separators or (len(text) > 2 and text[2] != sep):
            raise ValueError(f"working directory {path!r} must start with a drive root like C:{sep}")
        self.path = text

    def __call__(self) -> str:
        return self.path
