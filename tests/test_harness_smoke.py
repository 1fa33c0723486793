import csv
import json
from pathlib import Path

from wordscramble.dictionary import MemoryDictionary
from wordscramble.harness import play_round, run_batch, write_csv, write_manifest
from wordscramble.session import GameSession
from wordscramble.solvers import WordFinder

WORDS = ["ham", "ion", "lot", "main", "milton", "hamilton", "silk", "worm", "milk", "wok"]


def test_play_round_smoke():
    session = GameSession(MemoryDictionary(WORDS))
    r = play_round(session, "hamilton", ["ham", "HAM", "iron", "", "moan", "lot"])
    assert r["root_word"] == "hamilton"
    assert r["accepted"] == ["ham", "lot"]
    assert r["rejected"] == {
        "DUPLICATE_WORD": 1, "INVALID_LETTERS": 1, "TOO_SHORT": 1, "NOT_A_WORD": 1,
    }
    assert r["score"] == 48 == session.score


def test_run_batch_reaches_max_score():
    finder = WordFinder(WORDS)
    session = GameSession(MemoryDictionary(WORDS))
    results = run_batch(session, finder, ["hamilton", "silkworm"])
    assert [r["score"] for r in results] == [finder.max_score("hamilton"),
                                              finder.max_score("silkworm")]
    assert all(not r["rejected"] for r in results)


def test_write_outputs(tmp_path: Path):
    session = GameSession(MemoryDictionary(WORDS))
    results = [play_round(session, "hamilton", ["ham", "ham", "lot"])]

    p = write_csv(results, str(tmp_path / "out" / "run.csv"))
    rows = list(csv.DictReader(Path(p).read_text(encoding="utf-8").splitlines()))
    assert rows[0]["root_word"] == "hamilton"
    assert rows[0]["score"] == "48"
    assert rows[0]["accepted"] == "ham lot"
    assert rows[0]["rejected"] == "DUPLICATE_WORD=1"

    m = write_manifest({"num_rounds": 1}, str(tmp_path / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8")) == {"num_rounds": 1}
