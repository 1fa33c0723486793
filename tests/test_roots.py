from pathlib import Path

import pytest
from wordscramble.datasets import (
    DEFAULT_ROOT_WORD, RootWordSource, read_words, unique_preserve_order
)


def test_from_file_cleans_entries(tmp_path: Path):
    p = tmp_path / "roots.txt"
    p.write_text("Hamilton\n\n  silkworm  \ntwo words\n", encoding="utf-8")
    src = RootWordSource.from_file(p, seed=1)
    assert src.words == ["hamilton", "silkworm"]
    assert src.next_root_word() in {"hamilton", "silkworm"}


def test_seeded_sequence_is_reproducible():
    words = ["hamilton", "silkworm", "absolute", "cardigan", "elephant"]
    a = RootWordSource(words, seed=7)
    b = RootWordSource(words, seed=7)
    assert [a.next_root_word() for _ in range(10)] == [b.next_root_word() for _ in range(10)]


def test_empty_list_falls_back():
    assert RootWordSource([], seed=0).next_root_word() == DEFAULT_ROOT_WORD
    assert RootWordSource(["", "  "]).next_root_word() == "hamilton"


def test_missing_file_fails(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        RootWordSource.from_file(tmp_path / "nope.txt")


def test_read_words_keeps_order_and_duplicates(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("Ham\r\nion\n\nham\n", encoding="utf-8")
    assert read_words(p) == ["ham", "ion", "ham"]


def test_unique_preserve_order():
    assert unique_preserve_order(["ham", "lot", "ham", "ion", "lot"]) == ["ham", "lot", "ion"]
    assert unique_preserve_order(w for w in []) == []
