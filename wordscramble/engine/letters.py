"""
Letter-multiset primitives.

A root word is treated as a bag of letters: each occurrence can be used
once. A candidate is spellable from the root iff every one of its letter
occurrences can be matched against an unused occurrence in the root.

  is_sub_multiset("ion",  "hamilton") -> True
  is_sub_multiset("iron", "hamilton") -> False   (no 'r')
  is_sub_multiset("mama", "hamilton") -> False   (only one 'm', one 'a')
"""

from collections import Counter


def letter_counts(word: str) -> Counter:
    """Occurrences of each character in `word`."""
    return Counter(word)


def has_whitespace(word: str) -> bool:
    return any(ch.isspace() for ch in word)


def is_sub_multiset(candidate: str, root_word: str) -> bool:
    """
    Return True if `candidate` can be spelled from the letters of `root_word`.

    Both arguments are expected to be normalized (lowercase) already; the
    comparison is exact per character.
    """
    remaining = letter_counts(root_word)
    for ch in candidate:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True
