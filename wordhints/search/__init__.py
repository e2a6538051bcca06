from .counter import MatchCounter, PositionIndex
from .evaluator import (
    TOP_K, Record, PairRecord, BestForResult,
    find_best, find_best_for, find_best_pairs, default_workers, percent,
)
from .distribution import calculate_distribution, bucketize, render_histogram

__all__ = [
    "MatchCounter", "PositionIndex",
    "TOP_K", "Record", "PairRecord", "BestForResult",
    "find_best", "find_best_for", "find_best_pairs", "default_workers", "percent",
    "calculate_distribution", "bucketize", "render_histogram",
]
