import csv
import json
from pathlib import Path

from apps.cli import run


def test_run_writes_csv_and_manifest(tmp_path: Path, capsys):
    roots = tmp_path / "roots.txt"
    words = tmp_path / "words.txt"
    roots.write_text("hamilton\nsilkworm\n", encoding="utf-8")
    words.write_text("hamilton\nsilkworm\nham\nlot\nsilk\nworm\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = run.main(["--roots", str(roots), "--words", str(words), "--outdir", str(outdir),
                   "--progress", "off"])
    assert rc == 0
    assert "roots⊆words=True | OK" in capsys.readouterr().out

    (csv_path,) = outdir.glob("run_*.csv")
    (manifest_path,) = outdir.glob("run_*_manifest.json")
    rows = list(csv.DictReader(csv_path.read_text(encoding="utf-8").splitlines()))
    assert {r["root_word"]: int(r["score"]) for r in rows} == {"hamilton": 48, "silkworm": 64}

    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    assert manifest["num_rounds"] == 2
    assert manifest["total_score"] == 112
    assert manifest["wordlists"]["passed"] is True


def test_run_skips_multi_word_roots(tmp_path: Path, capsys):
    roots = tmp_path / "roots.txt"
    words = tmp_path / "words.txt"
    roots.write_text("hamilton\nice cream\n", encoding="utf-8")
    words.write_text("hamilton\nham\nlot\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = run.main(["--roots", str(roots), "--words", str(words), "--outdir", str(outdir),
                   "--progress", "off"])
    assert rc == 0
    # the list is still reported as bad, but the run completes
    assert capsys.readouterr().out.splitlines()[0].endswith("FAIL")

    (csv_path,) = outdir.glob("run_*.csv")
    rows = list(csv.DictReader(csv_path.read_text(encoding="utf-8").splitlines()))
    assert [(r["root_word"], r["score"]) for r in rows] == [("hamilton", "48")]
