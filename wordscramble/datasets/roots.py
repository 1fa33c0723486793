"""
Root word source.

Supplies the root word for each round, picked at random from a
newline-delimited list. Entries are normalized to lowercase; blank lines and
entries containing whitespace are skipped since a root must be one word.

A missing list file is a startup failure (FileNotFoundError). An empty list
falls back to DEFAULT_ROOT_WORD so a round can always start.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Iterable, List

from .io import read_words

DEFAULT_ROOT_WORD = "hamilton"


class RootWordSource:
    def __init__(self, words: Iterable[str], seed: int | None = None):
        self.words: List[str] = [
            w.strip().lower() for w in words
            if w.strip() and not any(ch.isspace() for ch in w.strip())
        ]
        self.rng = random.Random(seed)

    @classmethod
    def from_file(cls, path: Path | str, seed: int | None = None) -> "RootWordSource":
        return cls(read_words(path), seed=seed)

    def __len__(self) -> int:
        return len(self.words)

    def next_root_word(self) -> str:
        if not self.words:
            return DEFAULT_ROOT_WORD
        return self.rng.choice(self.words)
