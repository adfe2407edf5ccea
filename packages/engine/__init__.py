from .errors import (
    SolverError,
    InvalidConfiguration,
    PuzzleNotConfigured,
    InvalidStartWord,
    DictionaryLoadError,
)
from .config import SearchConfig, MAX_CHAIN_WORDS
from .puzzle import PuzzleModel, SIDE_NAMES, count_available, count_used
from .scoring import ScoredSolution, score_chain, rank_solutions, SolutionCollector
from .validation import validate_start_word
from .search import ChainSearch, SearchStats

__all__ = [
    "SolverError", "InvalidConfiguration", "PuzzleNotConfigured", "InvalidStartWord",
    "DictionaryLoadError", "SearchConfig", "MAX_CHAIN_WORDS", "PuzzleModel", "SIDE_NAMES",
    "count_available", "count_used", "ScoredSolution", "score_chain", "rank_solutions",
    "SolutionCollector", "validate_start_word", "ChainSearch", "SearchStats",
]
