"""
Best-guess search (sum of squared partition sizes), in parallel.

For a guess g, every target t induces a hint set; the number of targets that
fit it approximates the size of t's partition. Summing that count over all
targets approximates sum_i c_i^2 over the partitions of g, which is smallest
for guesses that split the targets most evenly. It is an upper bound: a gray
letter that is yellow elsewhere in g carries no position exclusion, so a hint
set can admit words whose feedback differs. Lower score = better guess.

Pipeline (one run):
  dispatch  - guesses (or guess pairs) get stable indices 0..N-1
  fan-out   - a pool of `workers` processes; each owns one MatchCounter
              built by the pool initializer and never shared
  fan-in    - results come back in completion order and are placed by index
  rank      - stable sort by score, ties to the better list_score
  truncate  - top K

Any worker count (including 1, which runs in-process) produces the same
ranking for the same inputs.
"""

from __future__ import annotations

import bisect
import logging
import os
from dataclasses import dataclass, field
from multiprocessing import Pool
from multiprocessing.util import Finalize
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from tqdm import tqdm

from wordhints.engine import Hints, calculate_hints, filter_candidates, merge_hints
from .counter import MatchCounter, PositionIndex

logger = logging.getLogger(__name__)

TOP_K = 20

# Records per message between the collector and a worker.
CHUNK_SIZE = 64


@dataclass
class Record:
    index: int
    word: str
    score: int = 0
    # 2 = still a possible answer, 1 = a target word, 0 = guess-only word
    list_score: int = 0


@dataclass
class PairRecord:
    index: int
    words: Tuple[str, str]
    score: int = 0


@dataclass
class BestForResult:
    """
    Outcome of a restricted search.

    matches: targets consistent with the hints. Empty means "no matches";
             a single entry is the answer and no search was run.
    records: ranked guesses (empty unless len(matches) > 1).
    """
    hints: Hints
    matches: List[str] = field(default_factory=list)
    records: List[Record] = field(default_factory=list)

    @property
    def solved(self) -> Optional[str]:
        return self.matches[0] if len(self.matches) == 1 else None


def default_workers() -> int:
    return os.cpu_count() or 1


def percent(score: int, n: int) -> float:
    """Score as the expected share of an n-word list left after the guess."""
    return 100.0 * score / (n * n) if n else 0.0


# ---- worker side ----

class _Scorer:
    """
    Scores one work item at a time against `targets`, counting matches in
    `dictionary` through a private MatchCounter.
    """

    def __init__(self, dictionary: Sequence[str], targets: Sequence[str],
                 restriction: Optional[Hints] = None, guesses: Sequence[str] = ()):
        self.targets = list(targets)
        self.restriction = restriction
        self.guesses = list(guesses)
        self.counter = MatchCounter(dictionary, PositionIndex(dictionary))

    def score_guess(self, record: Record) -> Record:
        count = self.counter.count_matches
        for target in self.targets:
            hints = calculate_hints(target, record.word)
            if self.restriction is not None:
                hints = merge_hints(hints, self.restriction)
            record.score += count(hints)
        return record

    def score_row(self, row: Tuple[int, int]) -> List[PairRecord]:
        """All pairs (guesses[i], guesses[j]) for j > i; indices start at `start`."""
        start, i = row
        first = self.guesses[i]
        count = self.counter.count_matches
        out: List[PairRecord] = []
        for k, second in enumerate(self.guesses[i + 1:]):
            rec = PairRecord(index=start + k, words=(first, second))
            for target in self.targets:
                hints = merge_hints(calculate_hints(target, first),
                                    calculate_hints(target, second))
                rec.score += count(hints)
            out.append(rec)
        return out


_SCORER: Optional[_Scorer] = None


def _init_worker(dictionary, targets, restriction, guesses=()) -> None:
    global _SCORER
    _SCORER = _Scorer(dictionary, targets, restriction, guesses)
    # runs when the worker exits after pool.close(); terminate() skips it
    Finalize(_SCORER, _log_worker_stats, exitpriority=10)


def _log_worker_stats() -> None:
    if _SCORER is not None:
        _SCORER.counter.log_stats(f"worker {os.getpid()}")


def _score_guess(record: Record) -> Record:
    return _SCORER.score_guess(record)


def _score_row(row) -> List[PairRecord]:
    return _SCORER.score_row(row)


# ---- collector side ----

def _fan_out(
        items: Iterable,
        total: int,
        task: str,
        scorer_args: Tuple,
        workers: int,
        progress: bool,
        desc: str,
        chunksize: int = CHUNK_SIZE,
) -> Iterator:
    """
    Yield worker results in completion order. `task` names the _Scorer method
    to run; in the pool it is reached through the matching module-level
    wrapper, since each process holds its own _Scorer.
    """
    bar = tqdm(total=total, ncols=80, desc=desc, unit="item", disable=not progress)
    try:
        if workers <= 1:
            scorer = _Scorer(*scorer_args)
            fn: Callable = getattr(scorer, task)
            for item in items:
                yield fn(item)
                bar.update(1)
            scorer.counter.log_stats(desc)
            return

        fn = _score_guess if task == "score_guess" else _score_row
        with Pool(processes=workers, initializer=_init_worker, initargs=scorer_args) as pool:
            for result in pool.imap_unordered(fn, items, chunksize=chunksize):
                yield result
                bar.update(1)
            pool.close()
            pool.join()
    finally:
        bar.close()


def _resolve_workers(workers: Optional[int], total: int) -> int:
    n = default_workers() if workers is None else int(workers)
    if n < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    return max(1, min(n, total))


def _rank(records: List[Record], top: Optional[int]) -> List[Record]:
    # list.sort is stable: equal (score, list_score) keep dispatch order
    records.sort(key=lambda r: (r.score, -r.list_score))
    return records if top is None else records[:top]


def _evaluate(
        guesses: Sequence[str],
        dictionary: Sequence[str],
        targets: Sequence[str],
        restriction: Optional[Hints],
        *,
        workers: Optional[int],
        progress: bool,
) -> List[Record]:
    n = len(guesses)
    nworkers = _resolve_workers(workers, n)
    logger.info("scoring %d guesses against %d targets with %d worker(s)",
                n, len(targets), nworkers)

    items = (Record(index=i, word=w) for i, w in enumerate(guesses))
    records: List[Optional[Record]] = [None] * n
    for rec in _fan_out(items, n, "score_guess", (dictionary, targets, restriction),
                        nworkers, progress, "Scoring"):
        records[rec.index] = rec
    return records  # type: ignore[return-value]


def find_best(
        targets: Sequence[str],
        guesses: Optional[Sequence[str]] = None,
        *,
        workers: Optional[int] = None,
        top: Optional[int] = TOP_K,
        progress: bool = False,
) -> List[Record]:
    """
    Rank every guess by sum over targets of the matching-set size.

    Args:
      targets : words that can be the answer
      guesses : words allowed as guesses (defaults to targets)
      workers : pool size (default: number of CPUs; 1 = in-process)
      top     : keep this many records (None = all)
      progress: show a tqdm bar on stderr
    """
    guesses = list(targets if guesses is None else guesses)
    targets = list(targets)
    records = _evaluate(guesses, targets, targets, None, workers=workers, progress=progress)

    target_set = set(targets)
    for r in records:
        r.list_score = 1 if r.word in target_set else 0
    return _rank(records, top)


def find_best_for(
        hints: Hints,
        targets: Sequence[str],
        guesses: Optional[Sequence[str]] = None,
        *,
        workers: Optional[int] = None,
        top: Optional[int] = TOP_K,
        progress: bool = False,
) -> BestForResult:
    """
    Rank guesses against the targets still consistent with `hints`.

    Each per-target hint set is merged with `hints` before counting, so the
    count is the partition size inside the restricted list.
    """
    targets = list(targets)
    matches = filter_candidates(targets, hints)
    result = BestForResult(hints=hints, matches=matches)
    if len(matches) <= 1:
        logger.info("%d match(es) for %s; no search needed", len(matches), hints.key())
        return result

    guesses = list(targets if guesses is None else guesses)
    # Merged hints already imply `hints`, so counting inside `matches` gives
    # the same numbers as counting over all targets.
    records = _evaluate(guesses, matches, matches, hints, workers=workers, progress=progress)

    match_set = set(matches)
    target_set = set(targets)
    for r in records:
        if r.word in match_set:
            r.list_score = 2
        elif r.word in target_set:
            r.list_score = 1
    result.records = _rank(records, top)
    return result


def _rows(n: int) -> Iterator[Tuple[int, int]]:
    """(first pair index, i) for every row i that has at least one partner."""
    start = 0
    for i in range(n - 1):
        yield start, i
        start += n - 1 - i


def find_best_pairs(
        targets: Sequence[str],
        guesses: Optional[Sequence[str]] = None,
        *,
        workers: Optional[int] = None,
        top: int = TOP_K,
        progress: bool = False,
) -> List[PairRecord]:
    """
    Rank unordered guess pairs (i < j) by sum over targets of the size of the
    set matching both guesses' hints together.

    Only the best `top` pairs are retained, by insertion ordered on
    (score, index), so ties keep enumeration order whatever the worker count.
    """
    if top < 1:
        raise ValueError(f"top must be >= 1, got {top}")
    guesses = list(targets if guesses is None else guesses)
    targets = list(targets)
    n = len(guesses)
    total = n * (n - 1) // 2
    nrows = max(0, n - 1)
    nworkers = _resolve_workers(workers, nrows)
    logger.info("scoring %d guess pairs against %d targets with %d worker(s)",
                total, len(targets), nworkers)

    # (score, index, words); indices are unique so words are never compared
    best: List[Tuple[int, int, Tuple[str, str]]] = []
    received = 0
    # one row already holds up to n-1 pairs, so rows go out one at a time
    for batch in _fan_out(_rows(n), nrows, "score_row", (targets, targets, None, guesses),
                          nworkers, progress, "Pairs", chunksize=1):
        for rec in batch:
            received += 1
            entry = (rec.score, rec.index, rec.words)
            if len(best) < top:
                bisect.insort(best, entry)
            elif entry < best[-1]:
                best.pop()
                bisect.insort(best, entry)

    if received != total:
        raise RuntimeError(f"expected {total} pair results, got {received}")
    return [PairRecord(index=i, words=words, score=s) for s, i, words in best]
