"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:      flatten per-round results into a tidy CSV (one row per round).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["root_word", "score", "num_accepted", "num_rejected", "time_ms", "accepted",
          "rejected"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of round results to CSV.

    The accepted words are joined with spaces; rejection counts are written
    as `REASON=count` pairs separated by spaces (e.g. "DUPLICATE_WORD=2").

    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for r in results:
            rejected = r.get("rejected", {})
            w.writerow({
                "root_word": r["root_word"],
                "score": r["score"],
                "num_accepted": len(r["accepted"]),
                "num_rejected": sum(rejected.values()),
                "time_ms": round(float(r["time_ms"]), 3),
                "accepted": " ".join(r["accepted"]),
                "rejected": " ".join(f"{k}={v}" for k, v in sorted(rejected.items())),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for the run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (paths, seed, sample, min_length, outdir)
      - wordlists: output of datasets.validate_wordlists(...)
      - num_rounds, total_score
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Compact UTC timestamp suitable for filenames, e.g. 20261016T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Short git hash of the current repo state, or 'unknown' when git is
    missing or this is not a checkout.
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
