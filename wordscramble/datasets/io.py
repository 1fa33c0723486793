from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_words(p: Path | str) -> List[str]:
    """
    Read a word list as clean entries: stripped, lowercased, blanks dropped.
    Order is preserved; duplicates are kept (see the validator for those).
    """
    return [ln.strip().lower() for ln in read_lines(p) if ln.strip()]


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    """Drop repeated entries, keeping the first occurrence of each."""
    return list(dict.fromkeys(words))


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one entry per line, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
