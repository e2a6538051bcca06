"""
Presentation and persistence of search results.

Responsibilities:
- format_ranking: "WORD 12.345%" lines for the console.
- write_csv:      one row per ranked guess (or guess pair).
- write_manifest: JSON manifest with config, dictionary hashes and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Union
import csv
import json
import subprocess
import datetime as dt

from wordhints.search.evaluator import PairRecord, Record, percent

AnyRecord = Union[Record, PairRecord]


def _words(r: AnyRecord) -> str:
    return " ".join(r.words) if isinstance(r, PairRecord) else r.word


def format_ranking(records: Sequence[AnyRecord], n: int) -> List[str]:
    """
    Console lines for ranked records. `n` is the size of the list the scores
    were computed over; percentages are score / n².
    """
    return [f"{_words(r)} {percent(r.score, n):.3f}%" for r in records]


def write_csv(records: Sequence[AnyRecord], path: str, n: int) -> str:
    """
    Serialize ranked records to CSV.

    Columns: rank, guess, score, percent, list_score
    (pairs write both words, space-separated, in `guess`; list_score is 0).

    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["rank", "guess", "score", "percent", "list_score"]
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for rank, r in enumerate(records, start=1):
            w.writerow({
                "rank": rank,
                "guess": _words(r),
                "score": r.score,
                "percent": round(percent(r.score, n), 3),
                "list_score": getattr(r, "list_score", 0),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest next to the CSV.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - wordlists: output of datasets.validate_wordlists(...)
      - num_targets, num_records
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
