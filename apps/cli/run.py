# apps/cli/run.py
"""
CLI entry point for wordhints.

Modes (pick one; positional HINTS run a lookup):
  --eval                 rank every guess against the full target list
  --best-for HINTS       rank guesses against the targets matching HINTS
  --pairs                rank guess pairs
  --dist WORD            histogram of partition sizes for one guess
  --feedback GUESS PATT  print the hint text for a G/Y/- pattern
  HINTS ...              list the targets matching each hint text

Hint text: BASE[+REQUIRED][~MISPLACED][-BAD], e.g. _A__E+R1-STL
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from wordhints.datasets import load_dictionary, validate_wordlists, pretty_summary
from wordhints.engine import (
    HintSyntaxError, WordError, filter_candidates, format_hints, hints_from_feedback,
    parse_hints, parse_word, validate_guess,
)
from wordhints.report import (
    format_ranking, git_commit_or_unknown, timestamp_id, write_csv, write_manifest,
)
from wordhints.search import (
    TOP_K, calculate_distribution, find_best, find_best_for, find_best_pairs,
    render_histogram,
)

logger = logging.getLogger("wordhints.cli")


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _progress_enabled(mode: str) -> bool:
    if mode == "auto":
        return sys.stderr.isatty()
    return mode == "bar"


def _write_outputs(args, records, n: int, mode: str) -> None:
    """CSV + manifest under --outdir, when requested."""
    if not args.outdir:
        return
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(records, str(outdir / f"{mode}_{run_id}.csv"), n)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "mode": mode,
        "config": vars(args),
        "wordlists": validate_wordlists(args.N, args.targets, args.guesses or args.targets),
        "num_targets": n,
        "num_records": len(records),
    }
    manifest_path = write_manifest(manifest, str(outdir / f"{mode}_{run_id}_manifest.json"))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


def _lookup(targets: List[str], texts: Sequence[str], N: int) -> int:
    valid = 0
    for i, text in enumerate(texts):
        try:
            hints = parse_hints(text, N)
        except HintSyntaxError:
            print(f"invalid argument {text!r}")
            continue
        valid += 1
        for word in filter_candidates(targets, hints):
            print(word)
        if i + 1 < len(texts):
            print("=" * 20)
    return 0 if valid or not texts else 1


def _best_for(args, targets: List[str], guesses: List[str], progress: bool) -> int:
    try:
        hints = parse_hints(args.best_for, args.N)
    except HintSyntaxError:
        print(f"invalid argument {args.best_for!r}")
        return 1

    result = find_best_for(hints, targets, guesses, workers=args.workers,
                           top=args.top, progress=progress)
    if not result.matches:
        print("no matches")
        return 0
    if result.solved:
        print(result.solved)
        return 0

    n = len(result.matches)
    print(n)
    for line in format_ranking(result.records, n):
        print(line)
    _write_outputs(args, result.records, n, "best_for")
    return 0


def _distribution(args, targets: List[str], guesses: List[str]) -> int:
    try:
        word = parse_word(args.dist, args.N)
    except WordError as e:
        print(e)
        return 1
    if not validate_guess(word, guesses, args.N):
        print(f"invalid argument {args.dist!r}")
        return 1
    for line in render_histogram(calculate_distribution(word, targets)):
        print(line)
    return 0


def _feedback(args) -> int:
    guess, pattern = args.feedback
    try:
        word = parse_word(guess, args.N)
        hints = hints_from_feedback(word, pattern)
    except (WordError, HintSyntaxError) as e:
        print(e)
        return 1
    # feedback runs without a dictionary unless --guesses names one
    if args.guesses and not validate_guess(word, load_dictionary(args.guesses, args.N), args.N):
        print(f"invalid argument {guess!r}")
        return 1
    print(format_hints(hints, args.N))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordhints: constraint lookup and best-guess search")
    ap.add_argument("--targets", default="filtered/small.txt",
                    help="dictionary of possible answers (one uppercase word per line)")
    ap.add_argument("--guesses",
                    help="dictionary of allowed guesses (default: same as --targets)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--eval", action="store_true", help="find the best starting guesses")
    ap.add_argument("--best-for", metavar="HINTS", help="find the best guesses given HINTS")
    ap.add_argument("--pairs", action="store_true", help="find the best pairs of guesses")
    ap.add_argument("--dist", metavar="WORD", help="partition-size histogram for WORD")
    ap.add_argument("--feedback", nargs=2, metavar=("GUESS", "PATTERN"),
                    help="print hint text for GUESS scored as PATTERN (G/Y/-)")
    ap.add_argument("--workers", type=int, help="worker processes (default: CPU count)")
    ap.add_argument("--top", type=int, default=TOP_K, help="how many results to show")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar on stderr (auto = only on a terminal)")
    ap.add_argument("--outdir", help="also write CSV + JSON manifest here")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="-v for progress info, -vv for debug output")
    ap.add_argument("hints", nargs="*", metavar="HINTS", help="hint texts to look up")
    args = ap.parse_args(argv)

    _setup_logging(args.verbose)

    if args.feedback:
        return _feedback(args)

    targets = load_dictionary(args.targets, args.N)
    guesses = load_dictionary(args.guesses, args.N) if args.guesses else targets
    logger.info("loaded %d targets, %d guesses", len(targets), len(guesses))
    if args.guesses:
        logger.info(pretty_summary(validate_wordlists(args.N, args.targets, args.guesses)))

    progress = _progress_enabled(args.progress)

    if args.dist:
        return _distribution(args, targets, guesses)

    if args.best_for:
        return _best_for(args, targets, guesses, progress)

    if args.eval:
        records = find_best(targets, guesses, workers=args.workers, top=args.top,
                            progress=progress)
        for line in format_ranking(records, len(targets)):
            print(line)
        _write_outputs(args, records, len(targets), "eval")
        return 0

    if args.pairs:
        records = find_best_pairs(targets, guesses, workers=args.workers, top=args.top,
                                  progress=progress)
        for line in format_ranking(records, len(targets)):
            print(line)
        _write_outputs(args, records, len(targets), "pairs")
        return 0

    return _lookup(targets, args.hints, args.N)


if __name__ == "__main__":
    raise SystemExit(main())
