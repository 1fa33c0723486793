from pathlib import Path

import pytest
import requests

from wordscramble.dictionary import (
    ApiDictionary, BaseDictionary, DictionaryUnavailable, MemoryDictionary, WordListDictionary,
    create_dictionary, get_dictionary_ids, register,
)


class _Resp:
    def __init__(self, status_code):
        self.status_code = status_code


class _FakeHttp:
    """Stands in for requests.Session; answers from a status table."""

    def __init__(self, statuses=None, error=None):
        self.statuses = statuses or {}
        self.error = error
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        word = url.rsplit("/", 1)[-1]
        return _Resp(self.statuses.get(word, 404))


def test_registry_ids():
    assert get_dictionary_ids() == ["api", "memory", "wordlist"]


def test_create_unknown_dictionary():
    with pytest.raises(ValueError, match="Unknown dictionary id"):
        create_dictionary("nope")


def test_register_requires_unique_id():
    class Nameless(BaseDictionary):
        id = ""

    with pytest.raises(ValueError):
        register(Nameless)

    class Clash(BaseDictionary):
        id = "memory"

    with pytest.raises(ValueError, match="Duplicate"):
        register(Clash)


def test_memory_dictionary_lookup():
    d = create_dictionary("memory", words=["Ham", " lot ", ""])
    assert len(d) == 2
    assert d.is_correctly_spelled("ham") is True
    assert d.is_correctly_spelled("HAM") is True
    assert d.is_correctly_spelled("moan") is False
    assert d.is_correctly_spelled("") is False
    assert d.is_correctly_spelled("ham", "de") is False


def test_wordlist_dictionary(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("ham\nion\n\nLOT\n", encoding="utf-8")
    d = create_dictionary("wordlist", path=p)
    assert isinstance(d, MemoryDictionary)
    assert d.is_correctly_spelled("lot") and not d.is_correctly_spelled("iron")


def test_wordlist_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        WordListDictionary(tmp_path / "missing.txt")


def test_api_dictionary_status_mapping():
    http = _FakeHttp({"ham": 200, "broken": 503})
    d = ApiDictionary(base_url="https://dict.example/entries/", session=http)
    assert d.is_correctly_spelled("ham") is True
    assert d.is_correctly_spelled("hmm") is False
    with pytest.raises(DictionaryUnavailable):
        d.is_correctly_spelled("broken")
    assert http.urls[0] == "https://dict.example/entries/en/ham"


def test_api_dictionary_caches_answers():
    http = _FakeHttp({"ham": 200})
    d = ApiDictionary(session=http)
    assert d.is_correctly_spelled("ham")
    assert d.is_correctly_spelled(" HAM ")
    assert d.is_correctly_spelled("zzz") is False
    assert d.is_correctly_spelled("zzz") is False
    assert len(http.urls) == 2


def test_api_dictionary_transport_error_is_unavailable():
    http = _FakeHttp(error=requests.ConnectionError("no route"))
    d = ApiDictionary(session=http)
    with pytest.raises(DictionaryUnavailable):
        d.is_correctly_spelled("ham")
    # failures are not cached as answers
    http.error = None
    http.statuses = {"ham": 200}
    assert d.is_correctly_spelled("ham") is True


def test_api_dictionary_blank_word_skips_request():
    http = _FakeHttp()
    assert ApiDictionary(session=http).is_correctly_spelled("  ") is False
    assert http.urls == []


def test_api_dictionary_cache_is_bounded():
    http = _FakeHttp({"ham": 200, "lot": 200, "ion": 200})
    d = ApiDictionary(session=http, cache_size=2)
    for w in ["ham", "lot", "ion"]:
        assert d.is_correctly_spelled(w)
    assert len(d._cache) == 2
    # "ham" was the oldest entry and has to be fetched again
    d.is_correctly_spelled("ion")
    d.is_correctly_spelled("ham")
    assert http.urls[-1].endswith("/en/ham")
    assert len(http.urls) == 4
