from pathlib import Path
from packages.datasets import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "enable_dict.txt"
    _write(p, ["aa", "Tiger", "RABBIT", "cat"])

    rep = validate_wordlist(str(p))
    assert rep["passed"] is True
    assert rep["count"] == rep["unique_count"] == 4
    assert (rep["min_length"], rep["max_length"]) == (2, 6)
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert s.startswith("enable_dict.txt:") and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    p = tmp_path / "sowpods.txt"
    p.write_text("tiger\ndon't\n???\nTIGER\n\n", encoding="utf-8")

    rep = validate_wordlist(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert rep["unique_count"] == 1
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "missing" in pretty_summary(rep)
