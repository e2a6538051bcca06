"""
Turn raw word lists into clean dictionaries.

Raw lists may start with a free-text header terminated by a line holding
only '---'. After it, every line that is exactly N ASCII letters is kept,
uppercased and deduplicated; the result is sorted.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List

from wordhints.engine.validation import WORD_LENGTH
from .io import read_lines, write_lines

logger = logging.getLogger(__name__)

HEADER_END = "---"


def filter_wordlist(lines: Iterable[str], N: int = WORD_LENGTH) -> List[str]:
    lines = list(lines)
    for i, ln in enumerate(lines):
        if ln.strip() == HEADER_END:
            lines = lines[i + 1:]
            break

    word_re = re.compile(rf"[A-Za-z]{{{N}}}")
    return sorted({ln.upper() for ln in lines if word_re.fullmatch(ln)})


def filter_directory(source_dir: Path | str, dest_dir: Path | str,
                     N: int = WORD_LENGTH) -> Dict[str, int]:
    """
    Filter every regular file in `source_dir` into a same-named file in
    `dest_dir`. Returns {file name: number of words kept}.
    """
    src = Path(source_dir)
    dst = Path(dest_dir)
    if not src.is_dir():
        raise FileNotFoundError(src)

    counts: Dict[str, int] = {}
    for entry in sorted(src.iterdir()):
        if not entry.is_file():
            continue
        words = filter_wordlist(read_lines(entry), N)
        write_lines(words, dst / entry.name)
        counts[entry.name] = len(words)
        logger.info("filtered %s: %d words", entry.name, len(words))
    return counts
