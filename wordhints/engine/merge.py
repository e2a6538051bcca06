"""
Combining the constraints of two guesses into one constraint set.

Both inputs are evidence about the same hidden word, so letter counts are
combined with max (the tighter lower bound wins), never summed.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict

from .errors import HintConflictError
from .hints import Hint, Hints


def _exact_counts(hints: Hints) -> Dict[str, int]:
    """Letters whose total count `hints` pins exactly (the Bad letters)."""
    fixed = hints.fixed_counts()
    required = hints.required_counts()
    return {ch: fixed[ch] + required[ch] for ch in hints.bad}


def merge_hints(a: Hints, b: Hints) -> Hints:
    """
    Return the strongest Hints implied by both `a` and `b`.

    Fixed      : union by position; a disagreement raises HintConflictError.
    Moving     : union.
    Required   : per letter, max of the two total lower bounds, minus the
                 occurrences the merged Fixed hints already pin.
    Bad        : union; exact counts from both sides must agree with each
                 other and with the merged lower bound.
    """
    by_pos: Dict[int, Hint] = {h.index: h for h in a.fixed}
    for h in b.fixed:
        other = by_pos.get(h.index)
        if other is not None and other.letter != h.letter:
            raise HintConflictError(
                f"fixed letters disagree at position {h.index}: {other.letter} vs {h.letter}")
        by_pos[h.index] = h

    fixed = tuple(by_pos.values())
    merged_fixed = Counter(h.letter for h in fixed)

    # Total lower bound per letter: Fixed + Required within each source.
    total_a = a.fixed_counts() + a.required_counts()
    total_b = b.fixed_counts() + b.required_counts()
    exact_a = _exact_counts(a)
    exact_b = _exact_counts(b)

    required = []
    for ch in sorted(set(total_a) | set(total_b) | set(merged_fixed)):
        lower = max(total_a[ch], total_b[ch], merged_fixed[ch])
        exact = {exact_a[ch]} if ch in exact_a else set()
        if ch in exact_b:
            exact.add(exact_b[ch])
        if len(exact) > 1 or (exact and exact.pop() < lower):
            raise HintConflictError(f"inconsistent counts for letter {ch}")
        required.append(ch * (lower - merged_fixed[ch]))

    return Hints(
        fixed=fixed,
        moving=a.moving + b.moving,
        required="".join(required),
        bad=a.bad + b.bad,
    )
