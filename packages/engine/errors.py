"""
Error taxonomy for the solver.

All errors derive from SolverError so callers (CLI, GUI, notebooks) can catch
one type. Each also derives from the closest builtin so generic handlers
(`except ValueError`) keep working.
"""

from __future__ import annotations


class SolverError(Exception):
    """Base class for every error raised by the solver packages."""


class InvalidConfiguration(SolverError, ValueError):
    """Malformed puzzle sides or search settings."""


class PuzzleNotConfigured(SolverError, RuntimeError):
    """A search was requested before setup_puzzle()."""

    def __init__(self, message: str = "Puzzle not configured. Call setup_puzzle first."):
        super().__init__(message)


class InvalidStartWord(SolverError, ValueError):
    """The seed word for a start-word search can't begin a chain."""

    def __init__(self, word: str, reason: str):
        self.word = word
        self.reason = reason
        super().__init__(f"Invalid start word {word!r}: {reason}")


class DictionaryLoadError(SolverError, OSError):
    """A word list could not be fetched or parsed."""
