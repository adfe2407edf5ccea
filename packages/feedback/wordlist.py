"""
User feedback word lists.

Two lists drive scoring and filtering:
  - approved: words the user vouches for (score bonus)
  - banned:   words the user rejects (never placed in a chain)

Both are the same type; only the name differs. Words are normalized to
upper case on every add/remove/contains so callers can pass any case.
Lists may be persisted as one word per line (see load/save).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Set

from packages.datasets.io import read_lines, write_lines


def _norm(word: str) -> str:
    return word.strip().upper()


class FeedbackList:
    def __init__(self, name: str, words: Iterable[str] = ()):
        self.name = name
        self._words: Set[str] = set()
        for w in words:
            self.add(w)

    def add(self, word: str) -> None:
        w = _norm(word)
        if w:
            self._words.add(w)

    def remove(self, word: str) -> None:
        # removing a word that isn't there is not an error
        self._words.discard(_norm(word))

    def contains(self, word: str) -> bool:
        return _norm(word) in self._words

    __contains__ = contains

    def list(self) -> List[str]:
        return sorted(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())

    def __repr__(self) -> str:
        return f"FeedbackList({self.name!r}, {len(self._words)} words)"

    # ---- persistence ----

    @classmethod
    def load(cls, name: str, path: Path | str) -> "FeedbackList":
        """Read a list file; a missing file gives an empty list."""
        p = Path(path)
        if not p.exists():
            return cls(name)
        return cls(name, (ln for ln in read_lines(p) if ln.strip()))

    def save(self, path: Path | str) -> str:
        return write_lines(self.list(), path)


@dataclass
class FeedbackLists:
    approved: FeedbackList = field(default_factory=lambda: FeedbackList("approved"))
    banned: FeedbackList = field(default_factory=lambda: FeedbackList("banned"))
