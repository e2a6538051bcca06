# apps/cli/filter.py
"""
Filter raw word lists into dictionaries.

Every file in --source is stripped of its '---' header, reduced to N-letter
words, uppercased, deduplicated, sorted and written to --dest.

Usage:
    python -m apps.cli.filter --source dicts --dest filtered
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from wordhints.datasets import filter_directory


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Filter raw word lists into N-letter dictionaries.")
    ap.add_argument("--source", default="dicts", help="directory of raw word lists")
    ap.add_argument("--dest", default="filtered", help="output directory")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("-v", "--verbose", action="store_true", help="log each file")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    counts = filter_directory(args.source, args.dest, args.N)
    for name, n in counts.items():
        print(f"{name:>10} {n:6d}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
