"""Lexical path normalization with filesystem case correction.

``normalize`` turns any path string (relative, drive-relative, padded with
whitespace, full of repeated separators or dot segments) into a fully
qualified Windows path such as ``C:\\Users\\Glen\\Pictures``. UNC paths
(``\\\\server\\share``) and ``file://`` URIs are not supported.
"""

from __future__ import annotations

from typing import Callable, Optional

from app.pathcanon.normalize.case_resolver import resolve_case
from app.pathcanon.normalize.collapse import remove_dot_segments, remove_empty_segments
from app.pathcanon.normalize.common import common_ancestor, directory_name
from app.pathcanon.normalize.sanitize import sanitize_segments
from app.pathcanon.normalize.segmenter import resolve_root, split_segments
from app.pathcanon.platform.chars import WINDOWS_CHARS, CharTable
from app.pathcanon.platform.drives import DriveMap, ProcessWorkingDirectory
from app.pathcanon.platform.probe import LocalPathProbe, PathProbe

WorkingDirectoryProvider = Callable[[], str]


class PathNormalizer:
    def __init__(
        self,
        working_directory: Optional[WorkingDirectoryProvider] = None,
        probe: Optional[PathProbe] = None,
        chars: CharTable = WINDOWS_CHARS,
    ) -> None:
        if working_directory is None or probe is None:
            drive_map = DriveMap.default()
            working_directory = working_directory or ProcessWorkingDirectory(drive_map)
            probe = probe or LocalPathProbe(drive_map, chars)
        self.working_directory = working_directory
        self.probe = probe
        self.chars = chars

    def normalize(self, path: Optional[str]) -> Optional[str]:
        """Return the canonical form of ``path``, or None when ``path`` is None."""
        segments = split_segments(path, self.chars)
        if segments is None:
            return None

        segments = resolve_root(segments, self.working_directory(), self.chars)
        # Empty segments go first so ".." never swallows one of them.
        remove_empty_segments(segments)
        # Dots go before sanitizing so "|?*.@*|.?" is not read as "..".
        remove_dot_segments(segments)
        sanitize_segments(segments, self.chars)
        remove_empty_segments(segments)
        return resolve_case(segments, self.probe, self.chars)

    def common_directory(self, path_a: Optional[str], path_b: Optional[str]) -> Optional[str]:
        return common_ancestor(self.normalize(path_a), self.normalize(path_b), self.chars)

    def directory_name(self, normalized: Optional[str]) -> Optional[str]:
        return directory_name(normalized, self.chars)

    def path_root(self) -> str:
        """Root of the working directory, e.g. ``C:\\``."""
        root = resolve_root(["", ""], self.working_directory(), self.chars)[0]
        return root + self.chars.directory_separator


def default_normalizer() -> PathNormalizer:
    from app.pathcanon.config import build_normalizer, load_config

    return build_normalizer(load_config())


def normalize(path: Optional[str]) -> Optional[str]:
    return default_normalizer().normalize(path)


def common_directory(path_a: Optional[str], path_b: Optional[str]) -> Optional[str]:
    return default_normalizer().common_directory(path_a, path_b)
