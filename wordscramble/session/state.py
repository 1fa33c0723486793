"""
Game session state.

Owns everything that changes during a round (root word, accepted words,
score) and is the only place that changes it. A UI reads snapshots and sends
two commands:

  session.start_round("hamilton")
  outcome = session.submit("  Ham ")   # Submission(...) or Rejection(...)

A session starts with no round; submitting before the first start_round is a
caller bug and raises NoActiveRound. Game-rule failures are returned, never
raised, and leave the state exactly as it was.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from wordscramble.dictionary.base import DEFAULT_LANGUAGE
from wordscramble.engine import MIN_LENGTH, Rejection, normalize, score, validate


class NoActiveRound(RuntimeError):
    """submit() was called before start_round()."""


@dataclass(frozen=True)
class Submission:
    """Outcome of an accepted submit()."""
    word: str
    points: int
    score: int
    accepted_words: Tuple[str, ...]

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class SessionSnapshot:
    root_word: str | None
    score: int
    accepted_words: Tuple[str, ...]


class GameSession:
    def __init__(self, dictionary, *, min_length: int = MIN_LENGTH,
                 language: str = DEFAULT_LANGUAGE):
        self.dictionary = dictionary
        self.min_length = int(min_length)
        self.language = language

        # round state; None root word means no round has started yet
        self._root_word: str | None = None
        self._accepted: List[str] = []  # most recent first
        self._score = 0

    # ---- read side ----

    @property
    def active(self) -> bool:
        return self._root_word is not None

    @property
    def root_word(self) -> str | None:
        return self._root_word

    @property
    def score(self) -> int:
        return self._score

    @property
    def accepted_words(self) -> Tuple[str, ...]:
        return tuple(self._accepted)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(self._root_word, self._score, self.accepted_words)

    # ---- commands ----

    def start_round(self, root_word: str) -> None:
        """
        Begin a new round on `root_word`: score back to 0, no accepted words.

        Raises ValueError if the root word is empty or contains whitespace;
        the root word source is expected never to produce one.
        """
        root = normalize(root_word)
        if not root or any(ch.isspace() for ch in root):
            raise ValueError(f"root word must be a single non-empty word; got {root_word!r}")
        self._root_word = root
        self._accepted = []
        self._score = 0

    def submit(self, raw: str) -> Union[Submission, Rejection]:
        """
        Normalize `raw`, validate it, and on success record the word and its
        points. On rejection nothing changes and the Rejection is returned.
        """
        if self._root_word is None:
            raise NoActiveRound("call start_round() before submit()")

        word = normalize(raw)
        outcome = validate(
            word, self._root_word, self._accepted,
            dictionary=self.dictionary,
            min_length=self.min_length,
            language=self.language,
        )
        if not outcome.accepted:
            return outcome

        # All checks (including the dictionary call) are done; apply in one go.
        points = score(word, self._root_word)
        self._accepted.insert(0, word)
        self._score += points
        return Submission(word=word, points=points, score=self._score,
                          accepted_words=self.accepted_words)
