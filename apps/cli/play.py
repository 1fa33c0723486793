# apps/cli/play.py
"""
Play wordscramble in the terminal.

Each round shows a root word; type words made from its letters, one per
line. Commands:
    :new    start a new round with another root word
    :words  show your words and how many the dictionary holds for this root
    :quit   leave (Ctrl-D works too)

Usage:
    python -m apps.cli.play --roots data/roots.txt --words data/words.txt
    python -m apps.cli.play --roots data/roots.txt --dictionary api
"""

from __future__ import annotations

import argparse
import sys
from typing import List, TextIO

from wordscramble.datasets import RootWordSource, read_words
from wordscramble.dictionary import DEFAULT_LANGUAGE, create_dictionary, get_dictionary_ids
from wordscramble.engine import MIN_LENGTH
from wordscramble.session import GameSession
from wordscramble.solvers import WordFinder


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordscramble — make words from a root word")
    ap.add_argument("--roots", default="data/roots.txt",
                    help="root word list (one word per line)")
    ap.add_argument("--words", default="data/words.txt",
                    help="dictionary word list (used by the 'wordlist' dictionary)")
    ap.add_argument("--dictionary", default="wordlist",
                    choices=[d for d in get_dictionary_ids() if d != "memory"],
                    help="where to check that a word is real")
    ap.add_argument("--min-length", type=int, default=MIN_LENGTH,
                    help="shortest accepted word, in characters")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--seed", type=int, help="RNG seed for root word selection")
    return ap


def _banner(session: GameSession, out: TextIO) -> None:
    out.write(f"\n== {session.root_word} ==  (score {session.score})\n")


def main(argv: List[str] | None = None, stdin: TextIO = sys.stdin,
         out: TextIO = sys.stdout) -> int:
    args = _build_parser().parse_args(argv)

    roots = RootWordSource.from_file(args.roots, seed=args.seed)
    if args.dictionary == "wordlist":
        dictionary = create_dictionary("wordlist", path=args.words, language=args.language)
        finder = WordFinder(read_words(args.words), min_length=args.min_length)
    else:
        dictionary = create_dictionary(args.dictionary)
        finder = None

    session = GameSession(dictionary, min_length=args.min_length, language=args.language)
    session.start_round(roots.next_root_word())
    _banner(session, out)

    for line in stdin:
        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":new":
            session.start_round(roots.next_root_word())
            _banner(session, out)
            continue
        if cmd == ":words":
            words = session.accepted_words
            out.write(", ".join(words) if words else "(none yet)")
            if finder is not None:
                out.write(f"  [{len(words)}/{len(finder.find(session.root_word))} found]")
            out.write("\n")
            continue

        outcome = session.submit(line)
        if outcome.accepted:
            out.write(f"+{outcome.points}  {outcome.word}  (score {outcome.score})\n")
        else:
            out.write(f"{outcome.title}: {outcome.message}\n")

    out.write(f"Final score: {session.score}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
