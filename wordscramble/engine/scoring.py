"""
Points for an accepted word.

A word earns its own length times the length of the round's root word, so
longer roots make every find worth more:

  score("ham", "hamilton") -> 3 * 8 = 24
"""


def score(candidate: str, root_word: str) -> int:
    """Points for `candidate`; only meaningful once the validator accepted it."""
    return len(candidate) * len(root_word)
