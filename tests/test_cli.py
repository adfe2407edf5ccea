import pytest
from pathlib import Path
from apps.cli import solve, wordlist


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_solve_cli_end_to_end(tmp_path: Path, capsys):
    d = tmp_path / "words.txt"
    _write(d, ["format", "thinks", "think", "mart"])
    banned = tmp_path / "banned.txt"
    _write(banned, ["thinks"])

    rc = solve.main([
        "fan", "otk", "rhs", "mil", "--dict", str(d), "--banned", str(banned),
        "--approve", "mart", "--max-words", "2", "--progress", "off",
        "--outdir", str(tmp_path / "reports"), "--possible",
    ])
    out = capsys.readouterr().out

    assert rc == 0
    assert "Found 2 solutions" in out
    assert "1. MART -> THINK" in out
    assert "-> THINKS" not in out
    assert len(list((tmp_path / "reports").glob("solve_*.csv"))) == 1
    assert len(list((tmp_path / "reports").glob("solve_*_manifest.json"))) == 1


def test_solve_cli_reports_errors(tmp_path: Path, capsys):
    d = tmp_path / "words.txt"
    _write(d, ["format"])
    rc = solve.main(["fa", "otk", "rhs", "mil", "--dict", str(d), "--progress", "off"])
    assert rc == 2
    assert "error:" in capsys.readouterr().err

    rc = solve.main(["fan", "otk", "rhs", "mil", "--dict", str(tmp_path / "missing.txt"),
                     "--progress", "off"])
    assert rc == 2


def test_wordlist_cli(tmp_path: Path, capsys):
    p = tmp_path / "approved.txt"
    assert wordlist.main([str(p), "add", "tiger", "cat"]) == 0
    assert wordlist.main([str(p), "remove", "CAT"]) == 0
    capsys.readouterr()
    assert wordlist.main([str(p), "list"]) == 0
    assert capsys.readouterr().out.split() == ["TIGER"]


def test_solve_cli_rejects_negative_top(tmp_path: Path):
    d = tmp_path / "words.txt"
    _write(d, ["format"])
    with pytest.raises(SystemExit) as ei:
        solve.main(["fan", "otk", "rhs", "mil", "--dict", str(d), "--top", "-1"])
    assert ei.value.code == 2
