from __future__ import annotations
from typing import Dict, Type

DEFAULT_LANGUAGE = "en"


class DictionaryUnavailable(Exception):
    """The dictionary could not answer (network down, service error, ...)."""


# ---- Global dictionary registry ----
REGISTRY: Dict[str, Type["BaseDictionary"]] = {}


def register(cls: Type["BaseDictionary"]) -> Type["BaseDictionary"]:
    """
    Decorator: @register on a dictionary class adds it to REGISTRY by its `id`.
    """
    did = getattr(cls, "id", None)
    if not did:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if did in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {did}")
    REGISTRY[did] = cls
    return cls


# ---- Base class that dictionaries inherit ----
class BaseDictionary:
    id = "base"
    name = "Base"

    def is_correctly_spelled(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError("Override in subclass")
