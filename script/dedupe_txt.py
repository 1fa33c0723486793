"""
Clean up a word list file in place.

Features:
- Removes duplicate entries, keeping the first occurrence (stable order).
- Lowercases entries, so 'Hamilton' and 'hamilton' collapse into one.
- Drops blank lines, and optionally entries with inner spaces (--single-words),
  which can never be root words.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in data/roots.txt --single-words
"""

import argparse
from pathlib import Path

from wordscramble.datasets.io import read_lines, unique_preserve_order, write_lines


def clean(lines: list[str], single_words: bool = False) -> list[str]:
    words = [s.strip().lower() for s in lines if s.strip()]
    if single_words:
        words = [w for w in words if not any(ch.isspace() for ch in w)]
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Lowercase, dedupe and tidy a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--single-words", action="store_true", help="drop entries containing spaces")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean(lines, single_words=args.single_words)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} unique)")

if __name__ == "__main__":
    main()
