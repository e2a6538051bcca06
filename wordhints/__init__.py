"""
wordhints: constraint engine and best-guess search for five-letter word puzzles.

Entry points:
  calculate_hints(target, guess) -> Hints
  matches_hints(word, hints)     -> bool
  find_best / find_best_for / find_best_pairs
"""

from .engine import Hints, calculate_hints, matches_hints, merge_hints
from .search import find_best, find_best_for, find_best_pairs

__version__ = "0.1.0"

__all__ = [
    "Hints", "calculate_hints", "matches_hints", "merge_hints",
    "find_best", "find_best_for", "find_best_pairs",
]
