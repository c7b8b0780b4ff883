from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence

from app.pathcanon.config import build_normalizer, load_config, parse_drive_mappings
from app.pathcanon.normalize.pipeline import PathNormalizer
from app.pathcanon.platform.drives import DriveMap


def bootstrap_normalizer(
    drives: Sequence[str] = (),
    cwd: Optional[str] = None,
) -> PathNormalizer:
    config = load_config()
    if drives:
        config = replace(config, drive_map=DriveMap(parse_drive_mappings(";".join(drives))))
    if cwd:
        config = replace(config, working_directory=cwd)
    return build_normalizer(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Normalize Windows-style paths")
    parser.add_argument("--drive", action="append", default=[], metavar="LETTER=HOSTPATH", help="Map a drive letter to a host directory (repeatable)")
    parser.add_argument("--cwd", default=None, help="Working directory to resolve relative paths against, e.g. C:\\work")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log probe activity")

    sub = parser.add_subparsers(dest="command", required=True)
    norm = sub.add_parser("normalize", help="Print the canonical form of each path")
    norm.add_argument("paths", nargs="+")
    common = sub.add_parser("common", help="Print the deepest directory shared by two paths")
    common.add_argument("path_a")
    common.add_argument("path_b")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        normalizer = bootstrap_normalizer(args.drive, args.cwd)
        if args.command == "normalize":
            for path in args.paths:
                print(normalizer.normalize(path))
            return 0

        shared = normalizer.common_directory(args.path_a, args.path_b)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if shared is None:
        print("(none)")
        return 1
    print(shared)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
