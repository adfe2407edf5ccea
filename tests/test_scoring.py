import pytest
from packages.engine import SearchConfig, SolutionCollector, rank_solutions, score_chain
from packages.engine.scoring import dedup_key, coverage


def test_score_counts_new_letters_and_coverage():
    # 11 distinct letters on a 12-letter board
    s = score_chain(("FORMAT", "THINKS"), set(), 12)
    assert s == pytest.approx(11 + 50 * 11 / 12)


def test_repeated_letters_only_score_once():
    # B, A, N: 3 new letters; the second word adds nothing new
    s = score_chain(("BANANA", "NAB"), set(), 6)
    assert s == pytest.approx(3 + 50 * 3 / 6)


def test_approved_words_add_bonus():
    plain = score_chain(("FORMAT", "THINK"), set(), 12)
    liked = score_chain(("FORMAT", "THINK"), {"THINK"}, 12)
    assert liked - plain == pytest.approx(100)


def test_bonus_and_weight_come_from_config():
    cfg = SearchConfig(approved_bonus=5, coverage_weight=0)
    assert score_chain(("AB",), {"AB"}, 4, cfg) == pytest.approx(5 + 2)


def test_rank_is_descending_and_stable():
    chains = [("AB",), ("CD",), ("ABCD",), ("EF",)]
    ranked = rank_solutions(chains, set(), 8)
    assert [s.words for s in ranked] == [("ABCD",), ("AB",), ("CD",), ("EF",)]
    assert all(a.score >= b.score for a, b in zip(ranked, ranked[1:]))


def test_collector_threshold_and_dedup():
    c = SolutionCollector(total_letters=10, acceptance_ratio=0.6)
    assert c.offer(("ABC", "CDEF")) is True          # 6/10 letters
    assert c.offer(("CDEF", "ABC")) is False         # same word set
    assert c.offer(("ABC", "CDE")) is False          # 5/10 letters
    assert c.offer(("GHIJ", "JABC")) is True
    assert c.chains == [("ABC", "CDEF"), ("GHIJ", "JABC")]
    assert len(c) == 2


def test_dedup_key_and_coverage():
    assert dedup_key(["TIGER", "CAT"]) == dedup_key(["CAT", "TIGER"]) == "CAT,TIGER"
    assert coverage(["AB", "BC"], 4) == pytest.approx(0.75)
    assert coverage(["AB"], 0) == 0.0
