"""
Letter-budget checks used while assembling chains.

Given:
  - the puzzle's per-letter availability
  - the letters already consumed by the chain so far ("spent")
  - a candidate word

Decide whether the word can be appended without consuming a letter more
times than the puzzle provides.

Consumption rule:
  - the first word of a chain consumes all of its letters
  - every later word starts on the previous word's last letter, which was
    already consumed, so it only consumes word[1:]
"""

from collections import Counter
from typing import Dict, Iterable, Mapping

# Letter -> count; spent/remaining budgets are plain Counters.
Budget = Mapping[str, int]


def consumed_letters(word: str, *, continues_chain: bool) -> Counter:
    """Letters a word takes out of the budget when placed in a chain."""
    return Counter(word[1:] if continues_chain else word)


def remaining_counts(availability: Budget, spent: Budget) -> Dict[str, int]:
    """
    Per-letter counts still unspent. Letters with nothing left are dropped,
    so an empty result means every copy on the board has been used.
    """
    out: Dict[str, int] = {}
    for ch, total in availability.items():
        left = total - spent.get(ch, 0)
        if left > 0:
            out[ch] = left
    return out


def fits_budget(needed: Budget, remaining: Budget) -> bool:
    """True if every letter in `needed` is covered by `remaining`."""
    for ch, n in needed.items():
        if n > remaining.get(ch, 0):
            return False
    return True


def distinct_spent(spent: Budget) -> int:
    # Counter.subtract leaves zero entries behind during backtracking
    return sum(1 for n in spent.values() if n > 0)


def letters_used(words: Iterable[str]) -> set:
    """Distinct letters appearing anywhere in the words."""
    used = set()
    for w in words:
        used.update(w)
    return used
