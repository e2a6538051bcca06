"""
Partition-size distribution for a single guess.

For every target, how many targets would still be possible after seeing the
feedback for `word`? The result maps partition size -> number of targets, and
renders as a ten-bucket text histogram.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import numpy as np

from wordhints.engine import calculate_hints
from .counter import MatchCounter, PositionIndex

NUM_BUCKETS = 10


def calculate_distribution(word: str, targets: Sequence[str]) -> Dict[int, int]:
    counter = MatchCounter(targets, PositionIndex(targets))
    dist: Dict[int, int] = {}
    for target in targets:
        count = counter.count_matches(calculate_hints(target, word))
        dist[count] = dist.get(count, 0) + 1
    return dist


def bucket_size_for(largest: int, num_buckets: int = NUM_BUCKETS) -> int:
    """
    Smallest "round" bucket size such that `largest` lands in the last bucket
    or earlier. Sizes step 1, 2, .., 10, 20, .., 100, 200, ...
    """
    size, increment = 1, 1
    while largest >= num_buckets * size:
        size += increment
        if (size // increment) % 10 == 0:
            increment *= 10
    return size


def bucketize(dist: Dict[int, int], num_buckets: int = NUM_BUCKETS) -> Tuple[int, np.ndarray]:
    """Return (bucket_size, counts per bucket) for a distribution."""
    if not dist:
        return 1, np.zeros(num_buckets, dtype=np.int64)
    size = bucket_size_for(max(dist), num_buckets)
    keys = np.fromiter(dist.keys(), dtype=np.int64)
    weights = np.fromiter(dist.values(), dtype=np.int64)
    counts = np.bincount(keys // size, weights=weights, minlength=num_buckets)
    return size, counts.astype(np.int64)


def render_histogram(dist: Dict[int, int], width: int = 100,
                     num_buckets: int = NUM_BUCKETS) -> List[str]:
    """
    One line per bucket: right-aligned lower bound, then a bar of '*'.
    Bars are scaled so the fullest bucket fits in `width` columns overall.
    """
    size, counts = bucketize(dist, num_buckets)
    label_len = len(f"{(num_buckets - 1) * size} ")
    graph_len = max(1, width - label_len)
    scale = max(1, -(-int(counts.max()) // graph_len))

    return [
        f"{i * size:>{label_len - 1}} " + "*" * (int(c) // scale)
        for i, c in enumerate(counts)
    ]
