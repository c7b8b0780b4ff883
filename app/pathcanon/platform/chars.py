"""Character tables and case rules for Windows-style paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple


def _classic_invalid_path_chars() -> FrozenSet[str]:
    return frozenset('"<>|') | frozenset(chr(c) for c in range(32))


def _upper_char(ch: str) -> str:
    upper = ch.upper()
    # "ß".upper() is "SS"; a character without a one-to-one mapping stays as is.
    return upper if len(upper) == 1 else ch


def fold_case(text: str) -> str:
    """Per-character upper-casing, the way Windows compares names.

    Unlike ``str.casefold`` this never changes the length of ``text``, so
    ``Straße`` and ``strasse`` stay different names.
    """
    return "".join(_upper_char(ch) for ch in text)


@dataclass(frozen=True)
class CharTable:
    directory_separator: str = "\\"
    alt_directory_separator: str = "/"
    volume_separator: str = ":"
    invalid_path_chars: FrozenSet[str] = _classic_invalid_path_chars()

    @property
    def separators(self) -> Tuple[str, str]:
        return self.directory_separator, self.alt_directory_separator

    def unify_separators(self, path: str) -> str:
        primary, alternate = self.separators
        return path.replace(alternate, primary)


WINDOWS_CHARS = CharTable()
