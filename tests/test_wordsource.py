from pathlib import Path
import pytest
import requests
from packages.datasets import WordSource
from packages.engine import DictionaryLoadError


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_unions_and_uppercases(tmp_path: Path):
    a = tmp_path / "enable.txt"
    b = tmp_path / "sowpods.txt"
    _write(a, ["tiger", "cat", "", "rabbit"])
    _write(b, ["TIGER", "Zebra", "don't", "rabbit"])

    progress = []
    ws = WordSource([a, b])
    ws.load(progress.append)

    assert ws.loaded
    assert ws.word_count() == 4  # TIGER, CAT, RABBIT, ZEBRA
    assert ws.is_valid_word("tiger") and ws.is_valid_word("ZEBRA")
    assert not ws.is_valid_word("DONT")
    assert progress and all(0.0 <= f <= 1.0 for f in progress)
    assert progress[-1] == 1.0


def test_load_is_idempotent(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["alpha", "beta"])
    ws = WordSource([p])
    ws.load()
    p.unlink()
    ws.load()  # no-op, the file isn't read again
    assert ws.word_count() == 2


def test_failed_load_leaves_source_unloaded(tmp_path: Path):
    good = tmp_path / "good.txt"
    _write(good, ["alpha"])
    ws = WordSource([good, tmp_path / "missing.txt"])

    with pytest.raises(DictionaryLoadError):
        ws.load()

    assert not ws.loaded
    assert ws.word_count() == 0
    assert ws.find_candidates("A", {"A", "L", "P", "H"}) == []
    assert ws.is_valid_word("alpha") is False

    # retrying after the problem is fixed loads everything
    _write(tmp_path / "missing.txt", ["beta"])
    ws.load()
    assert ws.word_count() == 2


def test_no_sources_is_a_load_error():
    with pytest.raises(DictionaryLoadError):
        WordSource().load()


def test_find_candidates_uses_letter_set_not_counts():
    ws = WordSource.from_words(["abba", "abc", "bad", "ab", "cab"])
    got = ws.find_candidates("a", {"A", "B"})
    assert sorted(got) == ["AB", "ABBA"]
    assert sorted(ws.find_candidates("B", {"A", "B", "D"})) == ["BAD"]
    assert ws.find_candidates("Q", {"A", "B"}) == []


class _FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")


def test_load_from_url(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse("cat\ndog\n")

    monkeypatch.setattr("packages.datasets.io.requests.get", fake_get)
    ws = WordSource(["https://example.org/words.txt"], timeout=5)
    ws.load()
    assert calls == [("https://example.org/words.txt", 5)]
    assert ws.is_valid_word("Dog")


def test_http_error_becomes_load_error(monkeypatch):
    monkeypatch.setattr("packages.datasets.io.requests.get",
                        lambda url, timeout: _FakeResponse("", status=404))
    ws = WordSource(["https://example.org/missing.txt"])
    with pytest.raises(DictionaryLoadError):
        ws.load()
    assert not ws.loaded
