"""
Word validation: "may this word be accepted right now?"

A candidate is checked against the round's root word and the words already
accepted this round. Rules run in a fixed order and the first failure wins,
so the player always sees exactly one reason:

  1. min length        -> TOO_SHORT
  2. not the root word -> SAME_AS_ORIGINAL
  3. letters available -> INVALID_LETTERS
  4. not used before   -> DUPLICATE_WORD
  5. real word         -> NOT_A_WORD (or ORACLE_UNAVAILABLE if the lookup fails)

`validate` has no side effects; the session decides what to do with the
outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple, Union

from wordscramble.dictionary.base import DEFAULT_LANGUAGE, DictionaryUnavailable
from .letters import has_whitespace, is_sub_multiset
from .rejections import Rejection, RejectionReason, reject

MIN_LENGTH = 1


@dataclass(frozen=True)
class Accept:
    word: str

    @property
    def accepted(self) -> bool:
        return True


def normalize(raw: str) -> str:
    """Lowercase and strip surrounding whitespace."""
    return raw.strip().lower()


# A rule sees (candidate, root_word, accepted_words, min_length) and answers
# "does the candidate pass?".
Rule = Callable[[str, str, Sequence[str], int], bool]


def _long_enough(word, root_word, accepted, min_length):
    return len(word) >= min_length


def _not_root(word, root_word, accepted, min_length):
    return word != root_word


def _letters_available(word, root_word, accepted, min_length):
    # Root words never contain whitespace, so any space in the candidate
    # could not be matched anyway; refuse it up front.
    if has_whitespace(word):
        return False
    return is_sub_multiset(word, root_word)


def _unused(word, root_word, accepted, min_length):
    return word not in accepted


# Order is part of the contract: it decides which reason the player sees.
RULES: Tuple[Tuple[RejectionReason, Rule], ...] = (
    (RejectionReason.TOO_SHORT, _long_enough),
    (RejectionReason.SAME_AS_ORIGINAL, _not_root),
    (RejectionReason.INVALID_LETTERS, _letters_available),
    (RejectionReason.DUPLICATE_WORD, _unused),
)


def validate(
        candidate: str,
        root_word: str,
        accepted_words: Sequence[str],
        *,
        dictionary,
        min_length: int = MIN_LENGTH,
        language: str = DEFAULT_LANGUAGE,
) -> Union[Accept, Rejection]:
    """
    Run the rule chain for an already-normalized `candidate`.

    Args:
      candidate      : normalized submission (see `normalize`)
      root_word      : the round's root word (lowercase)
      accepted_words : words accepted earlier this round
      dictionary     : any object with is_correctly_spelled(word, language)
      min_length     : shortest acceptable word, in characters
      language       : language tag handed to the dictionary

    Returns:
      Accept(candidate) if every rule passes, else the Rejection of the
      first rule that failed.
    """
    for reason, rule in RULES:
        if not rule(candidate, root_word, accepted_words, min_length):
            return reject(reason, min_length=min_length)

    # The dictionary lookup is last: it is the only rule that may be slow.
    try:
        real = dictionary.is_correctly_spelled(candidate, language)
    except DictionaryUnavailable:
        return reject(RejectionReason.ORACLE_UNAVAILABLE, min_length=min_length)
    if not real:
        return reject(RejectionReason.NOT_A_WORD, min_length=min_length)

    return Accept(candidate)
