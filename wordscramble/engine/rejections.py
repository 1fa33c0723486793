"""
Rejection reasons for submitted words.

Every rule in the validation chain maps to exactly one reason. A reason knows
its alert title; the message is built per call because the "too short" text
depends on the configured minimum length.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RejectionReason(Enum):
    TOO_SHORT = "too_short"
    SAME_AS_ORIGINAL = "same_as_original"
    INVALID_LETTERS = "invalid_letters"
    DUPLICATE_WORD = "duplicate_word"
    NOT_A_WORD = "not_a_word"
    ORACLE_UNAVAILABLE = "oracle_unavailable"

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES = {
    RejectionReason.TOO_SHORT: "Too short",
    RejectionReason.SAME_AS_ORIGINAL: "Invalid word",
    RejectionReason.INVALID_LETTERS: "Invalid word!",
    RejectionReason.DUPLICATE_WORD: "Duplicate word!",
    RejectionReason.NOT_A_WORD: "Invalid word",
    RejectionReason.ORACLE_UNAVAILABLE: "Dictionary unavailable",
}

_MESSAGES = {
    RejectionReason.SAME_AS_ORIGINAL: "You can't use that word",
    RejectionReason.INVALID_LETTERS: "Can't use that combination of letters",
    RejectionReason.DUPLICATE_WORD: "You've already used that one",
    RejectionReason.NOT_A_WORD: "That's not a word",
    RejectionReason.ORACLE_UNAVAILABLE: "Couldn't check that word right now, try again",
}


@dataclass(frozen=True)
class Rejection:
    """Why a candidate was refused, ready to show as an alert."""
    reason: RejectionReason
    title: str
    message: str

    @property
    def accepted(self) -> bool:
        return False


def reject(reason: RejectionReason, *, min_length: int = 1) -> Rejection:
    """
    Build the Rejection for `reason`.

    Example:
      reject(RejectionReason.TOO_SHORT, min_length=3).message
        -> "Your word must be at least 3 characters"
    """
    if reason is RejectionReason.TOO_SHORT:
        unit = "character" if min_length == 1 else "characters"
        message = f"Your word must be at least {min_length} {unit}"
    else:
        message = _MESSAGES[reason]
    return Rejection(reason=reason, title=reason.title, message=message)
