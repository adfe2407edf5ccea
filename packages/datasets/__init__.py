from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines, fetch_lines, read_source
from .wordsource import WordSource, normalize_words

__all__ = [
    "validate_wordlist", "pretty_summary", "read_lines", "write_lines", "fetch_lines",
    "read_source", "WordSource", "normalize_words",
]
