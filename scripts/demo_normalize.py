#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.pathcanon.main import bootstrap_normalizer
from app.pathcanon.utils.pathing import distinct_paths


def main() -> None:
    parser = argparse.ArgumentParser(description="Demo: normalize a batch of paths and show their shared directory")
    parser.add_argument("paths", nargs="*", default=[".", "..", "scripts/../app", "APP\\pathcanon\\\\main.py"])
    parser.add_argument("--drive", action="append", default=[], help="LETTER=HOSTPATH drive mapping (repeatable)")
    args = parser.parse_args()

    normalizer = bootstrap_normalizer(args.drive)
    print(f"Drive root: {normalizer.path_root()}")

    normalized = [normalizer.normalize(p) for p in args.paths]
    for raw, out in zip(args.paths, normalized):
        print(f"- {raw!r:40} -> {out}")

    unique = distinct_paths(p for p in normalized if p is not None)
    print(f"Distinct results: {len(unique)}")

    if len(unique) >= 2:
        shared = normalizer.common_directory(unique[0], unique[-1])
        print(f"Common directory of first and last: {shared or '(none)'}")


if __name__ == "__main__":
    main()
