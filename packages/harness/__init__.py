from .core import LetterBoxedSolver
from .io import write_csv, write_manifest

__all__ = ["LetterBoxedSolver", "write_csv", "write_manifest"]
