"""
Wordle-style feedback for a single (guess, target) pair, and the constraint
set that feedback implies.

Conventions for patterns:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

Both functions use the canonical two-pass algorithm:
  1) Mark exact matches and count the target letters left over.
  2) Mark a misplaced match only while the letter still has leftover
     occurrences; this caps yellows by the true multiplicity in the target.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Literal

from .errors import HintSyntaxError, WordError
from .hints import Hint, Hints

PatternChar = Literal["G", "Y", "-"]


def _check_lengths(a: str, b: str) -> None:
    if len(a) != len(b):
        raise WordError(f"words must have the same length: {a!r} vs {b!r}")


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Examples:
      score("BELLE", "LEVEL") -> "-GYYY"
      score("LEMON", "LEVEL") -> "GG---"
    """
    guess = guess.strip().upper()
    answer = answer.strip().upper()
    _check_lengths(guess, answer)

    pattern = ["-"] * len(guess)

    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def calculate_hints(target: str, guess: str) -> Hints:
    """
    Constraints on any word that could still be `target` after `guess`.

    Pass 1 turns exact matches into Fixed hints. Pass 2 turns each misplaced
    letter that still has an unconsumed occurrence in the target into a Moving
    hint plus one Required occurrence. Every other guess letter is Bad, even
    when the same letter is Fixed or Moving elsewhere: that is what pins an
    exact count (guess PASTA vs a target with one A -> Moving A, Required A,
    Bad A).
    """
    _check_lengths(target, guess)

    fixed: List[Hint] = []
    remaining = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            fixed.append(Hint(g, i))
        else:
            remaining[t] += 1

    moving: List[Hint] = []
    required: List[str] = []
    bad: List[str] = []
    for i, g in enumerate(guess):
        if g == target[i]:
            continue
        if remaining[g] > 0:
            remaining[g] -= 1
            moving.append(Hint(g, i))
            required.append(g)
        else:
            bad.append(g)

    return Hints(
        fixed=tuple(fixed),
        moving=tuple(moving),
        required="".join(required),
        bad="".join(bad),
    )


def hints_from_feedback(guess: str, pattern: str) -> Hints:
    """
    Translate a feedback pattern the player saw into a constraint set.

    calculate_hints(t, g) == hints_from_feedback(g, score(g, t)) for any
    equal-length t and g.
    """
    guess = guess.strip().upper()
    pattern = pattern.strip().upper()
    _check_lengths(guess, pattern)

    fixed: List[Hint] = []
    moving: List[Hint] = []
    required: List[str] = []
    bad: List[str] = []
    for i, (g, p) in enumerate(zip(guess, pattern)):
        if p == "G":
            fixed.append(Hint(g, i))
        elif p == "Y":
            moving.append(Hint(g, i))
            required.append(g)
        elif p == "-":
            bad.append(g)
        else:
            raise HintSyntaxError(f"invalid feedback character {p!r} in {pattern!r}")

    return Hints(
        fixed=tuple(fixed),
        moving=tuple(moving),
        required="".join(required),
        bad="".join(bad),
    )
