"""
Dictionary validator.

What this module does:
- Validate a pair of filtered dictionaries: targets (words that can be the
  answer) and guesses (words that may be played).
- Enforce formatting rules (uppercase A-Z, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that targets ⊆ guesses.
- Return a machine-readable dict (for manifests) and a one-line summary.

Typical use:
    from wordhints.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "filtered/small.txt", "filtered/big.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # valid words
    sha256: str          # of the raw bytes; empty if missing
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    """Result for a (targets, guesses) pair."""
    N: int
    targets: FileReport
    guesses: FileReport
    targets_subset_guesses: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Return (valid_words, invalid_count). A valid line is exactly N uppercase
    ASCII letters; blank lines count as invalid.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if len(w) == N and w.isascii() and w.isalpha() and w.isupper():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


def validate_wordlists(N: int, targets_path: str, guesses_path: str) -> Dict:
    """
    Validate the targets/guesses dictionaries for word length N.

    Returns a JSON-serializable dict (ValidationReport schema). `passed`
    requires both files non-empty, free of invalid lines, and
    targets ⊆ guesses. Duplicates are reported in `issues` but do not fail.
    """
    issues: List[str] = []

    tgt_p = Path(targets_path)
    gss_p = Path(guesses_path)

    if not tgt_p.exists() or not gss_p.exists():
        if not tgt_p.exists():
            issues.append(f"targets file not found: {targets_path}")
        if not gss_p.exists():
            issues.append(f"guesses file not found: {guesses_path}")
        rep = ValidationReport(
            N=N,
            targets=FileReport(targets_path, tgt_p.exists(), 0, "", 0, 0),
            guesses=FileReport(guesses_path, gss_p.exists(), 0, "", 0, 0),
            targets_subset_guesses=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    targets, tgt_invalid = _load_and_check(tgt_p, N)
    guesses, gss_invalid = _load_and_check(gss_p, N)
    tgt_report = _file_report(tgt_p, targets, tgt_invalid)
    gss_report = _file_report(gss_p, guesses, gss_invalid)

    subset_ok = set(targets).issubset(guesses)
    if not subset_ok:
        missing = sorted(set(targets) - set(guesses))[:5]
        issues.append(f"targets not subset of guesses (e.g., {missing})")

    for name, rep in (("targets", tgt_report), ("guesses", gss_report)):
        if rep.count == 0:
            issues.append(f"{name} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{name} has {rep.invalid_lines} invalid line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{name} contains duplicate lines")

    passed = (
            subset_ok
            and tgt_invalid == 0
            and gss_invalid == 0
            and tgt_report.count > 0
            and gss_report.count > 0
    )

    rep = ValidationReport(
        N=N,
        targets=tgt_report,
        guesses=gss_report,
        targets_subset_guesses=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner, e.g.:
        N=5 | targets=2315 (uniq=2315, sha=abc123...) | guesses=12972 (uniq=12972, sha=def456...) | targets⊆guesses=True | OK
    """
    a = report["targets"]
    b = report["guesses"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | targets={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| guesses={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| targets⊆guesses={report['targets_subset_guesses']} | {status}"
    )
