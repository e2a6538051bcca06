"""
Testing words against a constraint set.

Given:
  - a word (or a pool of words)
  - a Hints value accumulated from earlier guesses

Return:
  - whether the word (or which words) could still be the hidden word.

This is the core step that turns feedback into a shrinking candidate set,
and the inner loop of every partition count in the search.
"""

from __future__ import annotations

from typing import Iterable, List

from .hints import UNKNOWN, Hints


def matches_hints(word: str, hints: Hints) -> bool:
    """
    Return True if `word` is consistent with `hints`.

    Checks in order, stopping at the first failure:
      1) every Fixed letter sits at its position
      2) no Moving letter sits at its excluded position
      3) every Required occurrence can be given its own non-Fixed position
      4) no Bad letter is left in a position not used by 1) or 3)
    """
    for h in hints.fixed:
        if word[h.index] != h.letter:
            return False

    for h in hints.moving:
        if h.index != UNKNOWN and word[h.index] == h.letter:
            return False

    used = [False] * len(word)
    for h in hints.fixed:
        used[h.index] = True

    # Greedy is exact here: a position can only serve its own letter, so
    # obligations for different letters never compete.
    for letter in hints.required:
        for j, ch in enumerate(word):
            if not used[j] and ch == letter:
                used[j] = True
                break
        else:
            return False

    for letter in hints.bad:
        for j, ch in enumerate(word):
            if not used[j] and ch == letter:
                return False

    return True


def filter_candidates(words: Iterable[str], hints: Hints) -> List[str]:
    """
    Keep only the words consistent with `hints` (order preserved).
    """
    return [w for w in words if matches_hints(w, hints)]
