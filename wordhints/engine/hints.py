"""
Constraint sets ("hints") accumulated from one or more guesses.

A green letter generates a Fixed hint.
A yellow letter generates a Moving hint and one Required letter.
A gray letter generates a Bad letter.

Example (1-based positions, as on the command line):
  First  guess TOAST, the A is yellow.
  Second guess PASTA, the first A is yellow, the second A is gray.

  -> Moving = [A2, A3], Required = "A", Bad = "A"

The hidden word cannot have an A at position 2 or 3 (it would have been
green), and PASTA tells us it holds exactly one A (otherwise the second A
would have been yellow too).

Counting rules:
  - Required letters are counted outside the Fixed positions.
  - A letter only in Required: at least that many occurrences.
  - A letter in Required and Bad: exactly that many occurrences.
  - A letter only in Bad: no occurrences outside the Fixed positions.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import HintConflictError

# Position of a Moving hint when only the letter is known, not where it isn't.
UNKNOWN = -1


@dataclass(frozen=True, order=True)
class Hint:
    letter: str
    index: int

    def __str__(self) -> str:
        pos = "?" if self.index == UNKNOWN else str(self.index)
        return f"{self.letter}{pos}"


def _as_hint(h) -> Hint:
    return h if isinstance(h, Hint) else Hint(h[0], int(h[1]))


@dataclass(frozen=True)
class Hints:
    """
    Canonical constraint set.

    Any iterables are accepted on construction and normalized, so two values
    with the same logical content are equal, hash equal and share a key():
      fixed    : sorted by position, at most one hint per position
      moving   : deduplicated, sorted by (position, letter)
      required : sorted letters, multiplicity kept
      bad      : sorted letters, deduplicated
    """
    fixed: Tuple[Hint, ...] = ()
    moving: Tuple[Hint, ...] = ()
    required: str = ""
    bad: str = ""

    def __post_init__(self):
        fixed = tuple(sorted({_as_hint(h) for h in self.fixed}, key=lambda h: h.index))
        for prev, cur in zip(fixed, fixed[1:]):
            if prev.index == cur.index:
                raise HintConflictError(
                    f"two fixed letters at position {cur.index}: {prev.letter} and {cur.letter}")
        moving = tuple(sorted({_as_hint(h) for h in self.moving},
                              key=lambda h: (h.index, h.letter)))
        object.__setattr__(self, "fixed", fixed)
        object.__setattr__(self, "moving", moving)
        object.__setattr__(self, "required", "".join(sorted(self.required)))
        object.__setattr__(self, "bad", "".join(sorted(set(self.bad))))

    def key(self) -> str:
        """Serialization usable as a cache key: fixed|moving|required|bad."""
        return "|".join((
            "".join(str(h) for h in self.fixed),
            "".join(str(h) for h in self.moving),
            self.required,
            self.bad,
        ))

    def required_counts(self) -> Counter:
        return Counter(self.required)

    def fixed_counts(self) -> Counter:
        return Counter(h.letter for h in self.fixed)

    def is_empty(self) -> bool:
        return not (self.fixed or self.moving or self.required or self.bad)

    def __str__(self) -> str:
        return self.key()


def make_hints(
        fixed: Iterable = (),
        moving: Iterable = (),
        required: Iterable[str] = "",
        bad: Iterable[str] = "",
) -> Hints:
    """
    Convenience constructor accepting (letter, index) tuples for hints and any
    iterable of letters for required/bad.
    """
    return Hints(
        fixed=tuple(fixed),
        moving=tuple(moving),
        required="".join(required),
        bad="".join(bad),
    )
