from pathlib import Path
from packages.feedback import FeedbackList, FeedbackLists


def test_case_normalization_is_consistent():
    lst = FeedbackList("approved")
    lst.add("tiger")
    assert lst.contains("TIGER") and "Tiger" in lst
    lst.remove("TiGeR")
    assert "tiger" not in lst
    assert len(lst) == 0


def test_list_is_sorted_and_deduplicated():
    lst = FeedbackList("banned", ["zebra", "Apple", "APPLE", "  mango "])
    assert lst.list() == ["APPLE", "MANGO", "ZEBRA"]


def test_remove_missing_word_is_noop():
    lst = FeedbackList("banned")
    lst.remove("nothing")
    assert lst.list() == []


def test_lists_are_independent():
    fb = FeedbackLists()
    fb.approved.add("cat")
    fb.banned.add("cat")  # allowed; banning wins during search
    assert "CAT" in fb.approved and "CAT" in fb.banned
    assert FeedbackLists().approved.list() == []


def test_save_and_load(tmp_path: Path):
    p = tmp_path / "lists" / "banned.txt"
    FeedbackList("banned", ["dog", "cat"]).save(p)
    loaded = FeedbackList.load("banned", p)
    assert loaded.list() == ["CAT", "DOG"]
    assert FeedbackList.load("banned", tmp_path / "missing.txt").list() == []
