"""
Start-word validation.

This module answers the question: "Can this word open a chain on this board?"
A start word is valid iff:
  - it is not banned
  - it exists in the word source
  - every letter is on the board
  - no letter is used more times than the board provides
  - (optionally) no two consecutive letters sit on the same side

`start_word_problem` returns the first failing reason (or None);
`validate_start_word` raises InvalidStartWord with that reason.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from .errors import InvalidStartWord
from .puzzle import PuzzleModel, count_used

if TYPE_CHECKING:
    from packages.datasets.wordsource import WordSource
    from packages.feedback import FeedbackList


def start_word_problem(word: str, puzzle: PuzzleModel, words: "WordSource",
                       banned: "FeedbackList", *, enforce_sides: bool = True) -> Optional[str]:
    if not isinstance(word, str) or not word.strip():
        return "empty word"

    w = word.strip().upper()

    if w in banned:
        return "word is banned"
    if not words.is_valid_word(w):
        return "not in the dictionary"

    for ch in set(w):
        available = puzzle.count_available(ch)
        if available == 0:
            return f"letter {ch} is not on the board"
        if count_used(w, ch) > available:
            return f"letter {ch} is used more than {available} time(s)"

    if enforce_sides and not puzzle.follows_sides(w):
        return "consecutive letters from the same side"
    return None


def validate_start_word(word: str, puzzle: PuzzleModel, words: "WordSource",
                        banned: "FeedbackList", *, enforce_sides: bool = True) -> str:
    """Return the normalized (upper-case) word or raise InvalidStartWord."""
    problem = start_word_problem(word, puzzle, words, banned, enforce_sides=enforce_sides)
    if problem is not None:
        raise InvalidStartWord(str(word), problem)
    return word.strip().upper()
