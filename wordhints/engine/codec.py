"""
Human-readable hint text, as typed on the command line.

Format:  BASE[+REQUIRED][~MISPLACED][-BAD]

  BASE       one character per position: a letter fixes it, '_' leaves it open
  +REQUIRED  items LETTER DIGITS*; each item is one required occurrence of the
             letter, each digit a 1-based position the letter is known NOT to
             be at ('0' = position unknown)
  ~MISPLACED items LETTER DIGITS+; excluded positions without an extra
             required occurrence (merging guesses can produce these)
  -BAD       letters that must not appear (beyond the required/fixed ones)

Examples:
  _A__E+R1-STL     A at 2, E at 5, an R somewhere but not at 1, no S/T/L
  _____+A23-A      exactly one A, not at 2 or 3

parse_hints(format_hints(h)) == h for every Hints the engine produces.
"""

from __future__ import annotations

import re
from collections import defaultdict
from typing import Dict, List

from .errors import HintConflictError, HintSyntaxError
from .hints import UNKNOWN, Hint, Hints

WORD_LENGTH = 5

_ITEM = re.compile(r"([A-Z])([0-9]*)")


def _pattern(length: int) -> re.Pattern:
    return re.compile(
        rf"^([_A-Z]{{{length}}})"
        r"(?:\+((?:[A-Z][0-9]*)+))?"
        r"(?:~((?:[A-Z][0-9]+)+))?"
        r"(?:-([A-Z]+))?$"
    )


def _positions(digits: str, length: int, text: str) -> List[int]:
    out = []
    for d in digits:
        pos = int(d)
        if pos > length:
            raise HintSyntaxError(f"position {pos} out of range in {text!r}")
        out.append(UNKNOWN if pos == 0 else pos - 1)
    return out


def parse_hints(text: str, length: int = WORD_LENGTH) -> Hints:
    """
    Parse hint text into a Hints value. Raises HintSyntaxError if malformed.
    """
    if not 0 < length <= 9:
        raise HintSyntaxError(f"hint text supports word lengths 1-9, got {length}")

    raw = text.strip().upper()
    m = _pattern(length).match(raw)
    if m is None:
        raise HintSyntaxError(f"invalid argument {text!r}")
    base, req, mis, bad = m.group(1), m.group(2) or "", m.group(3) or "", m.group(4) or ""

    fixed = [Hint(ch, i) for i, ch in enumerate(base) if ch != "_"]
    moving: List[Hint] = []
    required: List[str] = []

    for letter, digits in _ITEM.findall(req):
        required.append(letter)
        moving.extend(Hint(letter, p) for p in _positions(digits, length, text))
    for letter, digits in _ITEM.findall(mis):
        moving.extend(Hint(letter, p) for p in _positions(digits, length, text))

    try:
        return Hints(fixed=tuple(fixed), moving=tuple(moving),
                     required="".join(required), bad=bad)
    except HintConflictError as e:
        raise HintSyntaxError(str(e)) from e


def _digits(hints: List[Hint]) -> str:
    return "".join("0" if h.index == UNKNOWN else str(h.index + 1) for h in hints)


def format_hints(hints: Hints, length: int = WORD_LENGTH) -> str:
    """
    Canonical text for `hints`. Moving positions are attached to the first
    required occurrence of their letter, or listed under '~' when the letter
    has none.
    """
    base = ["_"] * length
    for h in hints.fixed:
        base[h.index] = h.letter

    by_letter: Dict[str, List[Hint]] = defaultdict(list)
    for h in hints.moving:
        by_letter[h.letter].append(h)

    req_parts: List[str] = []
    seen = set()
    for letter in hints.required:
        if letter in seen:
            req_parts.append(letter)
        else:
            seen.add(letter)
            req_parts.append(letter + _digits(sorted(by_letter.get(letter, []))))

    mis_parts = [letter + _digits(sorted(by_letter[letter]))
                 for letter in sorted(by_letter) if letter not in seen]

    out = "".join(base)
    if req_parts:
        out += "+" + "".join(req_parts)
    if mis_parts:
        out += "~" + "".join(mis_parts)
    if hints.bad:
        out += "-" + hints.bad
    return out
