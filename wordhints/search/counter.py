"""
Memoized partition sizes.

Scoring a guess means asking "how many dictionary words fit these hints?"
once per target. Many targets share a hint set, so each worker keeps a cache
keyed by Hints.key(). A cache belongs to exactly one worker and is never read
by another.

PositionIndex narrows the scan when a hint set fixes at least one letter: only
words with that letter at that position can match, so the scan starts from the
smallest such bucket instead of the whole dictionary.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from wordhints.engine import Hints, matches_hints

logger = logging.getLogger(__name__)


class PositionIndex:
    """(position, letter) -> words with that letter at that position."""

    def __init__(self, words: Sequence[str]):
        self.words: List[str] = list(words)
        buckets: Dict[Tuple[int, str], List[str]] = defaultdict(list)
        for w in self.words:
            for i, ch in enumerate(w):
                buckets[(i, ch)].append(w)
        self._buckets = dict(buckets)

    def bucket(self, index: int, letter: str) -> List[str]:
        return self._buckets.get((index, letter), [])

    def candidates(self, hints: Hints) -> List[str]:
        """Smallest word list guaranteed to contain every match of `hints`."""
        best = self.words
        for h in hints.fixed:
            b = self.bucket(h.index, h.letter)
            if len(b) < len(best):
                best = b
                if not best:
                    break
        return best


class MatchCounter:
    """
    Per-worker cache: hint key -> number of dictionary words matching.

    Attributes:
      scans : cache misses (each one scanned the dictionary or a bucket)
      hits  : lookups answered from the cache
    """

    def __init__(self, words: Sequence[str], index: Optional[PositionIndex] = None):
        self.words = words
        self.index = index
        self.cache: Dict[str, int] = {}
        self.scans = 0
        self.hits = 0

    def count_matches(self, hints: Hints) -> int:
        key = hints.key()
        count = self.cache.get(key)
        if count is not None:
            self.hits += 1
            return count

        pool = self.index.candidates(hints) if self.index is not None else self.words
        count = 0
        for w in pool:
            if matches_hints(w, hints):
                count += 1

        self.scans += 1
        self.cache[key] = count
        return count

    def clear(self) -> None:
        self.cache.clear()
        self.scans = 0
        self.hits = 0

    def log_stats(self, label: str = "counter") -> None:
        logger.debug("%s: %d cached keys, %d scans, %d hits",
                     label, len(self.cache), self.scans, self.hits)
