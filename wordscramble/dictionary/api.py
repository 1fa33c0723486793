"""
Dictionary backed by the free dictionary web API.

  GET {base_url}/{language}/{word}
    200 -> the word has at least one entry  -> True
    404 -> no entry                         -> False
    anything else, or a transport error     -> DictionaryUnavailable

An outage must never look like "not a word", hence the distinct exception.
Answers are cached per (language, word); once `cache_size` entries are held the
oldest one is dropped.
"""

from __future__ import annotations

from typing import Dict, Tuple
from urllib.parse import quote

import requests

from .base import BaseDictionary, DEFAULT_LANGUAGE, DictionaryUnavailable, register

DEFAULT_API_URL = "https://api.dictionaryapi.dev/api/v2/entries"


@register
class ApiDictionary(BaseDictionary):
    id = "api"
    name = "dictionaryapi.dev"

    def __init__(self, base_url: str = DEFAULT_API_URL, timeout: float = 5.0, session=None,
                 cache_size: int = 4096):
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self.session = session or requests.Session()
        self.cache_size = max(1, int(cache_size))
        self._cache: Dict[Tuple[str, str], bool] = {}

    def _url(self, word: str, language: str) -> str:
        return f"{self.base_url}/{quote(language)}/{quote(word)}"

    def is_correctly_spelled(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        word = word.strip().lower()
        if not word:
            return False

        key = (language, word)
        if key in self._cache:
            return self._cache[key]

        try:
            r = self.session.get(self._url(word, language), timeout=self.timeout)
        except requests.RequestException as e:
            raise DictionaryUnavailable(f"lookup failed for {word!r}: {e}") from e

        if r.status_code == 200:
            found = True
        elif r.status_code == 404:
            found = False
        else:
            raise DictionaryUnavailable(f"lookup for {word!r} returned HTTP {r.status_code}")

        if len(self._cache) >= self.cache_size:
            # dicts keep insertion order: the first key is the oldest
            del self._cache[next(iter(self._cache))]
        self._cache[key] = found
        return found
