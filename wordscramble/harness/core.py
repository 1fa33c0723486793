"""
Round-playing harness.

- play_round: start a round on one root word and submit a list of words in
              order, recording what was accepted and why the rest was not.
- run_batch:  play one round per root word, feeding each round the finder's
              answers (so the result is the best attainable score).

Everything goes through GameSession.submit, the same path a player takes, so
a batch run exercises the real validation chain and dictionary.
"""

from __future__ import annotations
import time
from collections import Counter
from typing import Dict, Iterable, List

from wordscramble.session import GameSession
from wordscramble.solvers import WordFinder


def play_round(session: GameSession, root_word: str, words: Iterable[str]) -> Dict:
    """
    Play a full round on `root_word`, submitting `words` one by one.

    Returns:
        dict with keys:
            root_word (str), accepted (list[str], submission order),
            rejected (dict reason_name -> count), score (int), time_ms (float)
    """
    session.start_round(root_word)

    accepted: List[str] = []
    rejected: Counter = Counter()

    t0 = time.perf_counter()
    for w in words:
        outcome = session.submit(w)
        if outcome.accepted:
            accepted.append(outcome.word)
        else:
            rejected[outcome.reason.name] += 1
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "root_word": session.root_word,
        "accepted": accepted,
        "rejected": dict(rejected),
        "score": session.score,
        "time_ms": dt,
    }


def run_batch(session: GameSession, finder: WordFinder, roots: Iterable[str]) -> List[Dict]:
    """
    Play each root in turn with every word the finder can spell from it.
    """
    out: List[Dict] = []
    for root in roots:
        out.append(play_round(session, root, finder.find(root)))
    return out
