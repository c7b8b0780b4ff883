"""Environment-driven configuration for the default normalizer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from app.pathcanon.normalize.pipeline import PathNormalizer
from app.pathcanon.platform.drives import DriveMap, FixedWorkingDirectory, ProcessWorkingDirectory
from app.pathcanon.platform.probe import LocalPathProbe

DRIVES_ENV = "PATHCANON_DRIVES"
CWD_ENV = "PATHCANON_CWD"


@dataclass(frozen=True)
class NormalizerConfig:
    drive_map: DriveMap = field(default_factory=DriveMap.default)
    working_directory: Optional[str] = None


def parse_drive_mappings(text: str) -> Dict[str, str]:
    """Parse ``"C=/;T=/tmp/work"`` into ``{"C": "/", "T": "/tmp/work"}``."""
    mappings: Dict[str, str] = {}
    for entry in text.split(";"):
        entry = entry.strip()
        if not entry:
            continue
        letter, sep, root = entry.partition("=")
        letter = letter.strip().rstrip(":").upper()
        root = root.strip()
        if not sep or len(letter) != 1 or not root:
            raise ValueError(f"invalid drive mapping {entry!r}, expected LETTER=HOSTPATH")
        mappings[letter] = root
    return mappings


def load_config(environ: Optional[Mapping[str, str]] = None) -> NormalizerConfig:
    env = os.environ if environ is None else environ
    drives = env.get(DRIVES_ENV, "").strip()
    drive_map = DriveMap(parse_drive_mappings(drives)) if drives else DriveMap.default()
    cwd = env.get(CWD_ENV, "").strip() or None
    return NormalizerConfig(drive_map=drive_map, working_directory=cwd)


def build_normalizer(config: NormalizerConfig) -> PathNormalizer:
    if config.working_directory:
        working_directory = FixedWorkingDirectory(config.working_directory)
    else:
        working_directory = ProcessWorkingDirectory(config.drive_map)
    return PathNormalizer(working_directory, LocalPathProbe(config.drive_map))
