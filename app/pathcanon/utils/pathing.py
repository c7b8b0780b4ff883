from __future__ import annotations

from typing import Iterable, List, Optional

from app.pathcanon.normalize.pipeline import PathNormalizer, default_normalizer
from app.pathcanon.platform.chars import fold_case


def path_key(path: str) -> str:
    """Case-folded key for comparing Windows paths."""
    return fold_case(path)


def paths_equivalent(path1: Optional[str], path2: Optional[str]) -> bool:
    if path1 is None or path2 is None:
        return path1 is path2
    return path_key(path1) == path_key(path2)


def distinct_paths(paths: Iterable[str]) -> List[str]:
    """Drop later duplicates that differ only by case, keeping first-seen order."""
    seen: set[str] = set()
    out: List[str] = []
    for path in paths:
        key = path_key(path)
        if key not in seen:
            seen.add(key)
            out.append(path)
    return out


def is_under_root(candidate: str, root: str, normalizer: Optional[PathNormalizer] = None) -> bool:
    normalizer = normalizer or default_normalizer()
    cand = normalizer.normalize(candidate)
    rt = normalizer.normalize(root)
    if cand is None or rt is None:
        return False
    sep = normalizer.chars.directory_separator
    cand_key = path_key(cand)
    rt_key = path_key(rt).rstrip(sep)
    return cand_key == rt_key or cand_key.startswith(rt_key + sep)
