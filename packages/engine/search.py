"""
Depth-first chain search.

Main idea:
  - Every word the word source offers for a board letter (sides in order
    LEFT, TOP, RIGHT, BOTTOM) is tried as the first word of a chain.
  - A chain is extended with words that start on its last letter and whose
    remaining letters still fit the unspent letter budget.
  - A chain stops growing once it hits max_words, once enough distinct
    letters are spent (terminal_spent_ratio), or once the board is empty.
    Stopped chains are offered to the SolutionCollector; dead ends that
    never reach a stop condition are dropped.

Budget:
  - Only the loop over first words is time-boxed: every `check_every`
    attempts the clock is read and the whole search stops once
    `time_limit_s` has passed. What was accepted so far is still returned.
  - The recursive extension of one chain is not time-boxed; its depth is
    bounded by max_words.

The chain list and the spent Counter are mutated in place and undone on the
way back out, so only tuple snapshots ever leave a branch.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass
from typing import Callable, List, Optional, TYPE_CHECKING

from .config import SearchConfig, check_max_words
from .constraints import (
    consumed_letters,
    distinct_spent,
    fits_budget,
    remaining_counts,
)
from .puzzle import PuzzleModel
from .scoring import ScoredSolution, SolutionCollector, rank_solutions
from .validation import validate_start_word

if TYPE_CHECKING:
    from packages.datasets.wordsource import WordSource
    from packages.feedback import FeedbackLists

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    attempts: int = 0        # first words tried at the top level
    accepted: int = 0
    elapsed_s: float = 0.0
    timed_out: bool = False


class ChainSearch:
    """
    One search over one puzzle. Build a new instance per search; the accepted
    chains and the attempt counters belong to this instance only.
    """

    def __init__(
            self,
            puzzle: PuzzleModel,
            words: "WordSource",
            feedback: "FeedbackLists",
            config: SearchConfig | None = None,
            *,
            clock: Callable[[], float] = time.monotonic,
    ):
        self.puzzle = puzzle
        self.words = words
        self.feedback = feedback
        self.config = config or SearchConfig()
        self.clock = clock

        self.total_letters = len(puzzle.all_letters)
        self.collector = SolutionCollector(self.total_letters, self.config.acceptance_ratio)
        self.stats = SearchStats()

    # ---- entry points ----

    def find_solutions(self, max_words: Optional[int] = None) -> List[ScoredSolution]:
        max_words = check_max_words(self.config.max_words if max_words is None else max_words)
        logger.info("Searching %s with max_words=%d", "/".join(self.puzzle.sides), max_words)

        t0 = self.clock()
        banned = self.feedback.banned
        for letter in self.puzzle.letters_in_order():
            candidates = self.words.find_candidates(letter, self.puzzle.all_letters)
            logger.debug("%d candidate first words for %s", len(candidates), letter)

            for word in candidates:
                self.stats.attempts += 1
                if self.stats.attempts % self.config.check_every == 0:
                    logger.debug("Checked %d first words...", self.stats.attempts)
                    if self.clock() - t0 > self.config.time_limit_s:
                        self.stats.timed_out = True
                        logger.info("Search time limit reached after %d attempts; "
                                    "returning current solutions", self.stats.attempts)
                        return self._finish(t0)

                if word in banned:
                    continue
                spent = consumed_letters(word, continues_chain=False)
                if not self._placeable(word, spent, self.puzzle.availability):
                    continue
                self._extend([word], spent, max_words)

        return self._finish(t0)

    def find_solutions_from_word(self, start_word: str,
                                 max_words: Optional[int] = None) -> List[ScoredSolution]:
        max_words = check_max_words(self.config.max_words if max_words is None else max_words)
        word = validate_start_word(start_word, self.puzzle, self.words, self.feedback.banned,
                                   enforce_sides=self.config.enforce_sides)
        logger.info("Searching %s from %s with max_words=%d",
                    "/".join(self.puzzle.sides), word, max_words)

        t0 = self.clock()
        self.stats.attempts = 1
        self._extend([word], consumed_letters(word, continues_chain=False), max_words)
        return self._finish(t0)

    # ---- recursion ----

    def _is_terminal(self, chain: List[str], spent: Counter, remaining: dict,
                     max_words: int) -> bool:
        if len(chain) >= max_words:
            return True
        if distinct_spent(spent) >= self.total_letters * self.config.terminal_spent_ratio:
            return True
        return not remaining

    def _extend(self, chain: List[str], spent: Counter, max_words: int) -> None:
        remaining = remaining_counts(self.puzzle.availability, spent)
        if self._is_terminal(chain, spent, remaining, max_words):
            self.collector.offer(tuple(chain))
            return

        banned = self.feedback.banned
        junction = chain[-1][-1]
        for word in self.words.find_candidates(junction, self.puzzle.all_letters):
            if word in banned or word in chain:
                continue
            needed = consumed_letters(word, continues_chain=True)
            if not self._placeable(word, needed, remaining):
                continue

            chain.append(word)
            spent.update(needed)
            self._extend(chain, spent, max_words)
            chain.pop()
            spent.subtract(needed)

    def _placeable(self, word: str, needed: Counter, remaining) -> bool:
        if not fits_budget(needed, remaining):
            return False
        return not self.config.enforce_sides or self.puzzle.follows_sides(word)

    def _finish(self, t0: float) -> List[ScoredSolution]:
        self.stats.elapsed_s = self.clock() - t0
        self.stats.accepted = len(self.collector)
        ranked = rank_solutions(self.collector.chains, self.feedback.approved,
                                self.total_letters, self.config)
        logger.info("Found %d solutions (%d first words tried, %.2fs)",
                    len(ranked), self.stats.attempts, self.stats.elapsed_s)
        return ranked
