"""
Search settings.

The two ratio thresholds are independent knobs:
  - terminal_spent_ratio: stop extending a chain once this share of the
    distinct puzzle letters has been consumed.
  - acceptance_ratio: keep a finished chain only if it covers at least this
    share of the distinct puzzle letters.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .errors import InvalidConfiguration

# Recursion depth guard; a chain never needs anywhere near this many words.
MAX_CHAIN_WORDS = 50


@dataclass(frozen=True)
class SearchConfig:
    max_words: int = 7
    terminal_spent_ratio: float = 0.8
    acceptance_ratio: float = 0.6
    check_every: int = 1000      # top-level attempts between clock checks
    time_limit_s: float = 10.0   # wall-clock budget for one search
    approved_bonus: float = 100.0
    coverage_weight: float = 50.0
    enforce_sides: bool = True

    def __post_init__(self):
        check_max_words(self.max_words)
        for name in ("terminal_spent_ratio", "acceptance_ratio"):
            v = getattr(self, name)
            if not 0.0 <= v <= 1.0:
                raise InvalidConfiguration(f"{name} must be within [0, 1]; got {v}")
        if self.check_every < 1:
            raise InvalidConfiguration(f"check_every must be >= 1; got {self.check_every}")
        if self.time_limit_s < 0:
            raise InvalidConfiguration(f"time_limit_s must be >= 0; got {self.time_limit_s}")

    def with_overrides(self, **overrides) -> "SearchConfig":
        """Copy with some fields replaced; None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def check_max_words(max_words: int) -> int:
    """Guardrail: chain length must stay within 1..MAX_CHAIN_WORDS."""
    if not isinstance(max_words, int) or not 1 <= max_words <= MAX_CHAIN_WORDS:
        raise InvalidConfiguration(
            f"max_words must be an int in 1..{MAX_CHAIN_WORDS}; got {max_words!r}")
    return max_words
