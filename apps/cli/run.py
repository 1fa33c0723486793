# apps/cli/run.py
"""
CLI entry point for batch "best possible score" runs.

This script:
  1) Validates the word lists (prints counts + SHA, checks roots ⊆ words).
  2) Loads the lists, builds the word finder and a session on an in-memory
     dictionary made from the word list.
  3) Plays every sampled root word with all the words the finder can spell,
     with a live progress indicator, and writes:
       - CSV:  one row per round (score, accepted words, rejection counts)
       - JSON: manifest with config, word-list hashes, git commit, totals
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordscramble.datasets import RootWordSource, read_words, validate_wordlists, pretty_summary
from wordscramble.dictionary import create_dictionary
from wordscramble.engine import MIN_LENGTH
from wordscramble.harness import play_round
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordscramble.session import GameSession
from wordscramble.solvers import WordFinder


def main(argv=None):
    """
    Parse CLI args, validate word lists, run the batch with progress, write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble — best-score batch runs")
    ap.add_argument("--roots", default="data/roots.txt", help="root word list")
    ap.add_argument("--words", default="data/words.txt", help="dictionary word list")
    ap.add_argument("--sample", type=int, help="play only K roots (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--min-length", type=int, default=MIN_LENGTH,
                    help="shortest accepted word, in characters")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.roots, args.words)
    print(pretty_summary(rep))

    # 2) Load lists, finder and session
    # same cleaning as the interactive game: multi-word lines are not roots
    roots = RootWordSource.from_file(args.roots).words
    words = read_words(args.words)
    finder = WordFinder(words, min_length=args.min_length)
    session = GameSession(create_dictionary("memory", words=words), min_length=args.min_length)

    # 3) Choose roots (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(roots):
        pool = list(roots)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(roots)

    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Playing", unit="round") if mode == "bar" else cases

    # 4) Play each root with live progress
    for idx, root in enumerate(iterator, 1):
        results.append(play_round(session, root, finder.find(root)))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_rounds": len(results),
        "total_score": sum(r["score"] for r in results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
