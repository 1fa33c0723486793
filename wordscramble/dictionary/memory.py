"""
In-memory dictionary.

Holds a fixed set of words for one language. Handy for tests and for small
embedded word lists; lookups are case-insensitive.
"""

from __future__ import annotations

from typing import Iterable, Set
from .base import BaseDictionary, DEFAULT_LANGUAGE, register


@register
class MemoryDictionary(BaseDictionary):
    id = "memory"
    name = "In-memory word set"

    def __init__(self, words: Iterable[str] = (), language: str = DEFAULT_LANGUAGE):
        self.language = language
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self._words

    def is_correctly_spelled(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word or language != self.language:
            return False
        return word in self
