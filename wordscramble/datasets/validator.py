"""
Word-list validator for wordscramble.

What this module does:
- Validate the two lists the game loads: roots.txt (root words drawn for each
  round) and words.txt (the dictionary used to accept answers).
- Enforce formatting rules (lowercase, a–z only, one word per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that roots ⊆ words (every root should itself be a real word).
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/roots.txt", "data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (roots, words) pair."""
    roots: FileReport
    words: FileReport
    roots_subset_words: bool
    passed: bool
    issues: List[str]


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one word per line (no inner spaces)
      - must be lowercase a–z
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isascii() and w.isalpha() and w.islower():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(roots_path: str, words_path: str) -> Dict:
    """
    Validate the roots/words lists.

    Returns
    -------
    Dict
        JSON-serializable (see ValidationReport) with counts, SHA-256,
        duplicate/invalid diagnostics, the roots ⊆ words check, a strict
        `passed` flag and a list of human-readable `issues`.
    """
    issues: List[str] = []

    roots_p = Path(roots_path)
    words_p = Path(words_path)

    if not roots_p.exists() or not words_p.exists():
        if not roots_p.exists():
            issues.append(f"roots file not found: {roots_path}")
        if not words_p.exists():
            issues.append(f"words file not found: {words_path}")
        rep = ValidationReport(
            roots=FileReport(roots_path, roots_p.exists(), 0, "", 0, 0),
            words=FileReport(words_path, words_p.exists(), 0, "", 0, 0),
            roots_subset_words=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    roots, roots_invalid = _load_and_check(roots_p)
    words, words_invalid = _load_and_check(words_p)
    roots_report = _report(roots_p, roots, roots_invalid)
    words_report = _report(words_p, words, words_invalid)

    roots_set = set(roots)
    subset_ok = roots_set.issubset(words)
    if not subset_ok:
        missing = sorted(roots_set.difference(words))[:5]
        issues.append(f"roots not subset of words (e.g., {missing})")

    for label, rep, invalid in (("roots", roots_report, roots_invalid),
                                ("words", words_report, words_invalid)):
        if rep.count == 0:
            issues.append(f"{label} file contains 0 valid words")
        if invalid:
            issues.append(f"{label} has {invalid} invalid line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{label} contains duplicate lines")

    # Duplicates are reported but do not fail the check
    passed = (
            subset_ok
            and roots_invalid == 0
            and words_invalid == 0
            and roots_report.count > 0
            and words_report.count > 0
    )

    rep = ValidationReport(
        roots=roots_report,
        words=words_report,
        roots_subset_words=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        roots=1200 (uniq=1200, sha=abc123...) | words=80000 (uniq=80000, sha=def456...) | roots⊆words=True | OK
    """
    a = report["roots"]
    b = report["words"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"roots={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| words={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| roots⊆words={report['roots_subset_words']} | {status}"
    )
