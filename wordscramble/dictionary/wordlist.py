"""
Dictionary backed by a newline-delimited word list on disk.

The file is read once at construction; a missing file raises
FileNotFoundError right away rather than on the first lookup.
"""

from __future__ import annotations

from pathlib import Path
from wordscramble.datasets.io import read_lines
from .base import DEFAULT_LANGUAGE, register
from .memory import MemoryDictionary


@register
class WordListDictionary(MemoryDictionary):
    id = "wordlist"
    name = "Word list file"

    def __init__(self, path: Path | str, language: str = DEFAULT_LANGUAGE):
        self.path = Path(path)
        super().__init__(read_lines(self.path), language=language)
