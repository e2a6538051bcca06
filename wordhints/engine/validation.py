"""
Word checks at the boundary of the engine.

Everything inside the engine assumes uppercase A-Z words of one shared length.
These helpers enforce that before words reach it:
  - parse_word:    user input -> canonical word, or WordError
  - check_words:   dictionary contract; a violation is fatal for the run
  - validate_guess: membership check for guess words given on the command line
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Set

from .errors import WordError

WORD_LENGTH = 5


def parse_word(text: str, N: int = WORD_LENGTH) -> str:
    """
    Normalize a user-supplied word to uppercase, or raise WordError if it is
    not exactly N letters.
    """
    w = text.strip()
    if not re.fullmatch(rf"[A-Za-z]{{{N}}}", w):
        raise WordError(f"invalid argument {text!r}")
    return w.upper()


def check_words(words: Iterable[str], N: Optional[int] = None) -> List[str]:
    """
    Return `words` as a list after checking every entry is uppercase A-Z and
    all share one length (N if given, else the first word's length).
    """
    out = list(words)
    for w in out:
        if N is None:
            N = len(w)
        if len(w) != N or not (w.isascii() and w.isalpha() and w.isupper()):
            raise WordError(f"dictionary word {w!r} is not {N} uppercase letters")
    return out


def validate_guess(word: str, allowed: Iterable[str], N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is N letters and appears in `allowed`
    (case-insensitive).
    """
    if not isinstance(word, str):
        return False

    w = word.strip().upper()
    if len(w) != N or not w.isalpha():
        return False

    allowed_set: Set[str] = {a.strip().upper() for a in allowed}
    return w in allowed_set
