"""
Word finder: every dictionary word that can be spelled from a root word.

Idea:
  - Turn each dictionary word into a length-26 vector of letter counts once,
    stacked into a (num_words, 26) matrix.
  - For a root word, a dictionary word is spellable iff its count vector is
    <= the root's count vector in every column. That is one vectorized
    comparison over the whole matrix instead of a Counter walk per word.

Only plain a–z entries are indexed; anything else can never be built from a
root word anyway.
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np

from wordscramble.datasets.io import unique_preserve_order
from wordscramble.engine import MIN_LENGTH, score

ASCII_a = 97


def letters_to_vec(word: str) -> np.ndarray:
    """Length-26 vector counting how often each letter occurs in `word`."""
    vec = np.zeros(26, dtype=np.int16)
    for ch in word:
        vec[ord(ch) - ASCII_a] += 1
    return vec


def _indexable(word: str) -> bool:
    return bool(word) and word.isascii() and word.isalpha() and word.islower()


class WordFinder:
    def __init__(self, words: Iterable[str], min_length: int = MIN_LENGTH):
        self.min_length = int(min_length)
        self.words: List[str] = [
            w for w in unique_preserve_order(w.strip().lower() for w in words) if _indexable(w)
        ]
        if self.words:
            self._counts = np.stack([letters_to_vec(w) for w in self.words])
        else:
            self._counts = np.zeros((0, 26), dtype=np.int16)
        self._lengths = np.array([len(w) for w in self.words], dtype=np.int32)

    def find(self, root_word: str) -> List[str]:
        """
        All indexed words spellable from `root_word`, excluding the root
        itself and words shorter than `min_length`.

        Sorted longest first, then alphabetically.
        """
        root = root_word.strip().lower()
        if not _indexable(root) or not self.words:
            return []

        fits = (self._counts <= letters_to_vec(root)).all(axis=1)
        fits &= self._lengths >= self.min_length
        found = [self.words[i] for i in np.flatnonzero(fits) if self.words[i] != root]
        found.sort(key=lambda w: (-len(w), w))
        return found

    def max_score(self, root_word: str) -> int:
        """Points a perfect player would collect on `root_word`."""
        root = root_word.strip().lower()
        return sum(score(w, root) for w in self.find(root))
