"""
Solver facade.

LetterBoxedSolver ties the pieces together for a caller (CLI, GUI, notebook):

- initialize:        one-time dictionary load, with progress reporting.
- setup_puzzle:      build a fresh PuzzleModel; drops cached solutions.
- find_solutions:    run a ChainSearch over every board letter.
- find_solutions_from_word: run a ChainSearch from one seed word.
- find_possible_words: word-source view for one letter (no chain state).
- feedback:          approve/ban words, then re-rank or re-search.

The facade owns the word source, the feedback lists, and the config, and
hands them to each ChainSearch explicitly. It is UI-agnostic and not
thread-safe: don't mutate feedback while a search on the same solver runs.
find_possible_words only reads, so several of those may run at once.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from packages.datasets.wordsource import ProgressFn, WordSource
from packages.engine import (
    ChainSearch,
    PuzzleModel,
    PuzzleNotConfigured,
    ScoredSolution,
    SearchConfig,
    SearchStats,
    count_used,
    rank_solutions,
)
from packages.feedback import FeedbackLists

logger = logging.getLogger(__name__)


class LetterBoxedSolver:
    def __init__(
            self,
            word_source: WordSource | None = None,
            *,
            sources: Sequence[Path | str] = (),
            feedback: FeedbackLists | None = None,
            config: SearchConfig | None = None,
            clock: Callable[[], float] = time.monotonic,
    ):
        self.words = word_source if word_source is not None else WordSource(sources)
        self.feedback = feedback if feedback is not None else FeedbackLists()
        self.config = config or SearchConfig()
        self.clock = clock

        self._puzzle: Optional[PuzzleModel] = None
        self._solutions: List[ScoredSolution] = []
        # accepted chains in discovery order; re-ranking starts from these
        self._accepted: List[Tuple[str, ...]] = []
        self._last_stats: Optional[SearchStats] = None
        # (max_words, start_word or None) of the last search, for re-runs
        self._last_query: Optional[tuple] = None

    # ---- lifecycle ----

    def initialize(self, on_progress: Optional[ProgressFn] = None) -> None:
        """Load the dictionary. Raises DictionaryLoadError; retry by calling again."""
        logger.info("Initializing solver...")
        self.words.load(on_progress)
        logger.info("Dictionary loaded with %d words", self.words.word_count())

    def setup_puzzle(self, left: str, top: str, right: str, bottom: str) -> PuzzleModel:
        # Build first so a bad side leaves the previous puzzle untouched.
        puzzle = PuzzleModel.from_sides(left, top, right, bottom)
        self._puzzle = puzzle
        self._clear_results()
        logger.info("Puzzle set up: %s; letters: %s",
                    puzzle.named_sides(), "".join(sorted(puzzle.all_letters)))
        return puzzle

    @property
    def puzzle(self) -> Optional[PuzzleModel]:
        return self._puzzle

    @property
    def solutions(self) -> List[ScoredSolution]:
        return list(self._solutions)

    @property
    def last_stats(self) -> Optional[SearchStats]:
        return self._last_stats

    def _require_puzzle(self) -> PuzzleModel:
        if self._puzzle is None:
            raise PuzzleNotConfigured()
        return self._puzzle

    # ---- searches ----

    def _new_search(self, puzzle: PuzzleModel) -> ChainSearch:
        return ChainSearch(puzzle, self.words, self.feedback, self.config, clock=self.clock)

    def find_solutions(self, max_words: Optional[int] = None) -> List[ScoredSolution]:
        search = self._new_search(self._require_puzzle())
        ranked = search.find_solutions(max_words)
        self._store(search, ranked, (max_words, None))
        return self.solutions

    def find_solutions_from_word(self, start_word: str,
                                 max_words: Optional[int] = None) -> List[ScoredSolution]:
        search = self._new_search(self._require_puzzle())
        ranked = search.find_solutions_from_word(start_word, max_words)
        self._store(search, ranked, (max_words, start_word))
        return self.solutions

    def _store(self, search: ChainSearch, ranked: List[ScoredSolution], query: tuple) -> None:
        self._accepted = search.collector.chains
        self._solutions = ranked
        self._last_stats = search.stats
        self._last_query = query

    def _clear_results(self) -> None:
        self._accepted = []
        self._solutions = []
        self._last_stats = None
        self._last_query = None

    def _rerun(self) -> List[ScoredSolution]:
        if self._puzzle is None or self._last_query is None:
            return []
        max_words, start_word = self._last_query
        if start_word is None:
            return self.find_solutions(max_words)
        if start_word in self.feedback.banned:
            # the seed itself is banned now: every cached chain contains it
            logger.info("Start word %s is banned; clearing solutions", start_word)
            self._clear_results()
            return []
        return self.find_solutions_from_word(start_word, max_words)

    def _rerank(self) -> List[ScoredSolution]:
        if self._puzzle is None:
            return []
        self._solutions = rank_solutions(
            self._accepted, self.feedback.approved,
            len(self._puzzle.all_letters), self.config)
        return self.solutions

    # ---- possible words ----

    def find_possible_words(self, letter: str) -> List[str]:
        """
        Dictionary words starting with `letter` that use only board letters.
        Banned words are NOT filtered here; that happens during chain search
        only. No side-rule filtering either.
        """
        if self._puzzle is None:
            logger.debug("No letters available")
            return []
        words = self.words.find_candidates(letter, self._puzzle.all_letters)
        logger.debug("Found %d possible words starting with %s", len(words), letter)
        return words

    def possible_words_by_letter(self) -> Dict[str, List[str]]:
        if self._puzzle is None:
            return {}
        return {ch: self.find_possible_words(ch) for ch in self._puzzle.letters_in_order()}

    # ---- feedback ----
    # Approval only changes scores, so cached solutions are re-ranked.
    # Banning changes what the search may place, so the last search re-runs.

    def add_approved_word(self, word: str) -> List[ScoredSolution]:
        self.feedback.approved.add(word)
        return self._rerank()

    def remove_approved_word(self, word: str) -> List[ScoredSolution]:
        self.feedback.approved.remove(word)
        return self._rerank()

    def is_approved_word(self, word: str) -> bool:
        return word in self.feedback.approved

    def ban_word(self, word: str) -> List[ScoredSolution]:
        self.feedback.banned.add(word)
        return self._rerun()

    def unban_word(self, word: str) -> List[ScoredSolution]:
        self.feedback.banned.remove(word)
        return self._rerun()

    def is_banned_word(self, word: str) -> bool:
        return word in self.feedback.banned

    # ---- letter accounting ----

    def count_available(self, letter: str) -> int:
        return self._require_puzzle().count_available(letter)

    @staticmethod
    def count_used(word: str, letter: str) -> int:
        return count_used(word, letter)
