"""
Chain acceptance, dedup and ranking.

Acceptance (SolutionCollector.offer):
  - a finished chain is kept only if it covers at least `acceptance_ratio`
    of the distinct puzzle letters
  - chains with the same word set are duplicates regardless of order; the
    first one found wins (key = sorted words joined with ',')

Score (higher is better), per chain:
  - +approved_bonus for every approved word
  - +1 for each letter not already seen earlier in the chain (chain order)
  - +coverage_weight * (distinct letters used / distinct puzzle letters)

Ranking sorts by score, descending. Python's sort is stable, so ties keep the
order in which the chains were accepted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Container, Iterable, List, Sequence, Set, Tuple

from .config import SearchConfig
from .constraints import letters_used

Chain = Tuple[str, ...]


@dataclass(frozen=True)
class ScoredSolution:
    words: Chain
    score: float

    @property
    def letters_used(self) -> int:
        return len(letters_used(self.words))

    def __str__(self) -> str:
        return " -> ".join(self.words)


def dedup_key(words: Sequence[str]) -> str:
    return ",".join(sorted(words))


def coverage(words: Sequence[str], total_letters: int) -> float:
    """Share of the puzzle's distinct letters used by the chain."""
    if total_letters <= 0:
        return 0.0
    return len(letters_used(words)) / total_letters


def score_chain(words: Sequence[str], approved: Container[str], total_letters: int,
                config: SearchConfig | None = None) -> float:
    cfg = config or SearchConfig()
    s = 0.0
    seen: Set[str] = set()
    for w in words:
        if w in approved:
            s += cfg.approved_bonus
        for ch in w:
            if ch not in seen:
                seen.add(ch)
                s += 1
    s += coverage(words, total_letters) * cfg.coverage_weight
    return s


def rank_solutions(chains: Iterable[Sequence[str]], approved: Container[str],
                   total_letters: int, config: SearchConfig | None = None) -> List[ScoredSolution]:
    scored = [ScoredSolution(tuple(c), score_chain(c, approved, total_letters, config))
              for c in chains]
    return sorted(scored, key=lambda sol: sol.score, reverse=True)


class SolutionCollector:
    """Accepted chains in discovery order, deduplicated by word set."""

    def __init__(self, total_letters: int, acceptance_ratio: float):
        self.total_letters = total_letters
        self.acceptance_ratio = acceptance_ratio
        self._chains: List[Chain] = []
        self._keys: Set[str] = set()

    def offer(self, words: Sequence[str]) -> bool:
        """Keep `words` if it covers enough letters and is new. Returns True if kept."""
        if coverage(words, self.total_letters) < self.acceptance_ratio:
            return False
        key = dedup_key(words)
        if key in self._keys:
            return False
        self._keys.add(key)
        self._chains.append(tuple(words))
        return True

    @property
    def chains(self) -> List[Chain]:
        return list(self._chains)

    def __len__(self) -> int:
        return len(self._chains)
