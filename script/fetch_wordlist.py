"""
Download a plain-text word list and write a clean copy.

What it does:
- Fetches a newline-delimited word list over HTTP.
- Keeps only lowercase a–z entries (optionally within a length range).
- De-duplicates while preserving the source order and writes to file.

Usage:
    python -m script.fetch_wordlist --out data/words.txt
    # root words: longer entries only
    python -m script.fetch_wordlist --min-len 8 --max-len 8 --out data/roots.txt
"""

import argparse

import requests

from wordscramble.datasets.io import unique_preserve_order, write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def fetch_words(url: str = URL, min_len: int = 1, max_len: int | None = None) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    words = []
    for ln in r.text.splitlines():
        w = ln.strip().lower()
        if not (w.isascii() and w.isalpha()):
            continue
        if len(w) < min_len or (max_len is not None and len(w) > max_len):
            continue
        words.append(w)
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Download and clean a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/words.txt")
    ap.add_argument("--min-len", type=int, default=1, help="drop words shorter than this")
    ap.add_argument("--max-len", type=int, help="drop words longer than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.min_len, args.max_len)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()
