import csv
import json
from pathlib import Path
from packages.engine import ScoredSolution
from packages.harness.io import write_csv, write_manifest, timestamp_id


def test_write_csv(tmp_path: Path):
    sols = [ScoredSolution(("FORMAT", "THINKS"), 56.8333333), ScoredSolution(("MART", "THINK"), 41.3)]
    path = write_csv(sols, str(tmp_path / "out" / "run.csv"))

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["rank"] for r in rows] == ["1", "2"]
    assert rows[0]["words"] == "FORMAT THINKS"
    assert rows[0]["score"] == "56.833"
    assert rows[0]["letters_used"] == "11"
    assert rows[1]["num_words"] == "2"


def test_write_manifest(tmp_path: Path):
    path = write_manifest({"run_id": "x", "path": tmp_path}, str(tmp_path / "m.json"))
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    assert data["run_id"] == "x"
    assert data["path"] == str(tmp_path)


def test_timestamp_id_shape():
    ts = timestamp_id()
    assert len(ts) == 16 and ts.endswith("Z") and ts[8] == "T"
