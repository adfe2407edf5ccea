"""
Puzzle model: four sides of three letters.

A PuzzleModel is built once per puzzle and never mutated; reconfiguring the
puzzle means building a new one. Derived data:
  - all_letters  : distinct letters on the board (<= 12)
  - availability : letter -> number of copies across all sides

Letters may repeat (e.g. sides "AAB", "CCD", ...). The availability count is
what bounds how often a letter may be consumed by one chain.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Tuple

from .errors import InvalidConfiguration

# Display tags only; the search treats sides uniformly.
SIDE_NAMES: Tuple[str, ...] = ("LEFT", "TOP", "RIGHT", "BOTTOM")
SIDE_LENGTH = 3


def count_used(word: str, letter: str) -> int:
    """Occurrences of `letter` in `word` (case-insensitive)."""
    return word.upper().count(letter.upper())


def _normalize_side(name: str, side: str) -> str:
    if not isinstance(side, str):
        raise InvalidConfiguration(f"{name} side must be a string; got {type(side).__name__}")
    s = side.strip().upper()
    if len(s) != SIDE_LENGTH:
        raise InvalidConfiguration(
            f"{name} side must have exactly {SIDE_LENGTH} letters; got {side!r}")
    if not all("A" <= ch <= "Z" for ch in s):
        raise InvalidConfiguration(f"{name} side must contain only letters A-Z; got {side!r}")
    return s


@dataclass(frozen=True)
class PuzzleModel:
    sides: Tuple[str, str, str, str]
    all_letters: FrozenSet[str] = field(init=False, repr=False)
    availability: Mapping[str, int] = field(init=False, repr=False, compare=False)
    _side_index: Dict[str, FrozenSet[int]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.sides) != len(SIDE_NAMES):
            raise InvalidConfiguration(
                f"a puzzle needs {len(SIDE_NAMES)} sides; got {len(self.sides)}")
        sides = tuple(_normalize_side(n, s) for n, s in zip(SIDE_NAMES, self.sides))

        side_index: Dict[str, set] = {}
        for i, side in enumerate(sides):
            for ch in side:
                side_index.setdefault(ch, set()).add(i)

        # frozen dataclass: derived fields have to go through object.__setattr__
        object.__setattr__(self, "sides", sides)
        object.__setattr__(self, "all_letters", frozenset("".join(sides)))
        object.__setattr__(self, "availability",
                           MappingProxyType(dict(Counter("".join(sides)))))
        object.__setattr__(self, "_side_index",
                           {ch: frozenset(ix) for ch, ix in side_index.items()})

    @classmethod
    def from_sides(cls, left: str, top: str, right: str, bottom: str) -> "PuzzleModel":
        return cls((left, top, right, bottom))

    @property
    def left(self) -> str:
        return self.sides[0]

    @property
    def top(self) -> str:
        return self.sides[1]

    @property
    def right(self) -> str:
        return self.sides[2]

    @property
    def bottom(self) -> str:
        return self.sides[3]

    def named_sides(self) -> Dict[str, str]:
        return dict(zip(SIDE_NAMES, self.sides))

    def letters_in_order(self) -> List[str]:
        """
        Distinct letters in side order (LEFT, TOP, RIGHT, BOTTOM), left to
        right within a side. A repeated letter is listed at its first spot.
        """
        seen = set()
        out: List[str] = []
        for ch in "".join(self.sides):
            if ch not in seen:
                seen.add(ch)
                out.append(ch)
        return out

    def count_available(self, letter: str) -> int:
        """Copies of `letter` across all four sides (case-insensitive)."""
        return self.availability.get(letter.upper(), 0)

    def sides_of(self, letter: str) -> FrozenSet[int]:
        """Indices (into SIDE_NAMES) of the sides carrying `letter`."""
        return self._side_index.get(letter.upper(), frozenset())

    def follows_sides(self, word: str) -> bool:
        """
        True if no two consecutive letters of `word` are forced onto the same
        side. With repeated letters a pair is fine as long as some choice of
        copies puts them on different sides.
        """
        w = word.upper()
        for a, b in zip(w, w[1:]):
            sa, sb = self.sides_of(a), self.sides_of(b)
            if not sa or not sb:
                return False
            if len(sa) == 1 and sa == sb:
                return False
        return True


def count_available(puzzle: PuzzleModel, letter: str) -> int:
    return puzzle.count_available(letter)
