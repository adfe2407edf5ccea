"""
WordSource: the dictionary the solver searches.

Responsibilities:
- load:            read one or more word lists (paths or http(s) URLs) once,
                   upper-case them and take the union.
- find_candidates: words starting with a letter whose letters all come from
                   a given set of letters.
- is_valid_word:   case-insensitive membership.

Notes:
- The letter check is against a SET of letters, not counts: "ABBA" fits
  {"A", "B"}. Per-letter counts are the search engine's job.
- Until a load succeeds every query answers empty/False instead of raising,
  so a UI can keep running while the dictionary is unavailable.
- A failed load commits nothing; call load() again to retry from scratch.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set

import requests

from packages.engine.errors import DictionaryLoadError
from .io import DEFAULT_TIMEOUT, read_source

logger = logging.getLogger(__name__)

ProgressFn = Callable[[float], None]


def normalize_words(lines: Iterable[str]) -> Set[str]:
    """Upper-case, strip, and keep only A–Z tokens."""
    out: Set[str] = set()
    for ln in lines:
        w = ln.strip().upper()
        if w and w.isascii() and w.isalpha():
            out.add(w)
    return out


class WordSource:
    def __init__(self, sources: Sequence[Path | str] = (), *, timeout: float = DEFAULT_TIMEOUT):
        self.sources: List[Path | str] = list(sources)
        self.timeout = timeout
        self._words: Set[str] = set()
        self._by_letter: Dict[str, List[str]] = {}
        self._loaded = False

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "WordSource":
        """Build an already-loaded source from an in-memory word list."""
        ws = cls()
        ws._commit(normalize_words(words))
        return ws

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self, on_progress: Optional[ProgressFn] = None) -> None:
        """
        Read every source and build the index. A second call on a loaded
        source does nothing.

        Raises DictionaryLoadError if any source can't be read.
        """
        if self._loaded:
            logger.info("Dictionary already loaded with %d words", len(self._words))
            return
        if not self.sources:
            raise DictionaryLoadError("no dictionary sources configured")

        logger.info("Starting dictionary load from %d source(s)", len(self.sources))
        words: Set[str] = set()
        for i, src in enumerate(self.sources, start=1):
            try:
                lines = read_source(src, timeout=self.timeout)
            except (OSError, UnicodeDecodeError, requests.RequestException) as e:
                logger.error("Error loading dictionary file %s: %s", src, e)
                raise DictionaryLoadError(f"failed to load dictionary {src}: {e}") from e

            before = len(words)
            words |= normalize_words(lines)
            logger.info("Loaded %s: %d lines, %d new words", src, len(lines), len(words) - before)
            if on_progress is not None:
                on_progress(i / len(self.sources))

        self._commit(words)
        logger.info("Dictionary loaded successfully with %d total unique words", len(words))

    def _commit(self, words: Set[str]) -> None:
        by_letter: Dict[str, List[str]] = {}
        for w in sorted(words):
            by_letter.setdefault(w[0], []).append(w)
        self._words = words
        self._by_letter = by_letter
        self._loaded = True

    def find_candidates(self, start_letter: str, available_letters: Iterable[str]) -> List[str]:
        """
        Every word beginning with `start_letter` spelled only with letters
        from `available_letters`. Order is not part of the contract.
        """
        if not self._loaded or not start_letter:
            return []
        allowed = frozenset(ch.upper() for ch in available_letters)
        return [w for w in self._by_letter.get(start_letter.upper(), ())
                if allowed.issuperset(w)]

    def is_valid_word(self, word: str) -> bool:
        return self._loaded and word.strip().upper() in self._words

    def word_count(self) -> int:
        return len(self._words)
