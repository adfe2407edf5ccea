# apps/cli/solve.py
"""
CLI entry point for solving a letter-boxed puzzle.

This script:
  1) Validates the dictionary files (prints counts + SHA per file).
  2) Loads the dictionary with a progress indicator.
  3) Loads approved/banned feedback lists (files and/or --approve/--ban).
  4) Searches for chains (all start letters, or one --start-word) and prints
     the top results; optionally lists possible words per letter.
  5) Optionally writes:
       - CSV:  ranked solutions
       - JSON: manifest with config, dictionary hashes, search stats, etc.

Usage:
    python -m apps.cli.solve ABC DEF GHI JKL --dict words.txt --top 5
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from tqdm import tqdm

from packages.datasets import WordSource, pretty_summary, validate_wordlist
from packages.datasets.io import is_url
from packages.engine import SearchConfig, SolverError
from packages.feedback import FeedbackList, FeedbackLists
from packages.harness import LetterBoxedSolver
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

DEFAULT_DICTS = [
    "packages/datasets/data/enable_dict.txt",
    "packages/datasets/data/sowpods.txt",
]


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "off"
    return mode


def _load_dictionary(solver: LetterBoxedSolver, mode: str) -> None:
    """Load with a tqdm bar (fractions are scaled to percent)."""
    if mode != "bar":
        solver.initialize()
        return
    with tqdm(total=100, ncols=80, desc="Loading dictionary", unit="%") as bar:
        def on_progress(fraction: float) -> None:
            bar.update(round(fraction * 100) - bar.n)
        solver.initialize(on_progress)


def _build_feedback(args) -> FeedbackLists:
    approved = (FeedbackList.load("approved", args.approved) if args.approved
                else FeedbackList("approved"))
    banned = FeedbackList.load("banned", args.banned) if args.banned else FeedbackList("banned")
    for w in args.approve:
        approved.add(w)
    for w in args.ban:
        banned.add(w)
    return FeedbackLists(approved=approved, banned=banned)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Letter-boxed puzzle solver")
    ap.add_argument("left", help="three letters on the left side")
    ap.add_argument("top", help="three letters on the top side")
    ap.add_argument("right", help="three letters on the right side")
    ap.add_argument("bottom", help="three letters on the bottom side")
    ap.add_argument("--dict", dest="dicts", action="append",
                    help="dictionary file or http(s) URL (repeatable; default: "
                         + ", ".join(DEFAULT_DICTS) + ")")
    ap.add_argument("--approved", help="file of approved words (one per line)")
    ap.add_argument("--banned", help="file of banned words (one per line)")
    ap.add_argument("--approve", action="append", default=[], help="approve a word (repeatable)")
    ap.add_argument("--ban", action="append", default=[], help="ban a word (repeatable)")
    ap.add_argument("--max-words", type=int, default=7, help="longest chain to build")
    ap.add_argument("--start-word", help="only search chains starting with this word")
    ap.add_argument("--possible", action="store_true",
                    help="also list possible words for every board letter")
    ap.add_argument("--top", dest="limit", type=int, default=10, help="how many solutions to print")
    ap.add_argument("--time-limit", type=float, help="search budget in seconds (default 10)")
    ap.add_argument("--no-sides", action="store_true",
                    help="allow consecutive letters from the same side")
    ap.add_argument("--outdir", help="write CSV + manifest into this directory")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="Show dictionary load progress (auto=bar on a terminal).")
    ap.add_argument("--log-level", default="WARNING",
                    help="logging level (DEBUG, INFO, WARNING, ...)")
    return ap


def main(argv=None) -> int:
    """
    Parse CLI args, validate dictionaries, search, print, and write outputs.
    """
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.limit < 0:
        ap.error(f"--top must be >= 0; got {args.limit}")
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)-8s - %(name)s - %(message)s",
    )

    dicts = args.dicts or DEFAULT_DICTS

    # 1) Validate local dictionary files and print a one-liner per file
    reports = [validate_wordlist(d) for d in dicts if not is_url(d)]
    for rep in reports:
        print(pretty_summary(rep))

    try:
        config = SearchConfig().with_overrides(
            time_limit_s=args.time_limit,
            enforce_sides=False if args.no_sides else None,
        )
        solver = LetterBoxedSolver(
            WordSource(dicts), feedback=_build_feedback(args), config=config)

        # 2) Load the dictionary
        _load_dictionary(solver, _progress_mode(args.progress))
        print(f"Dictionary: {solver.words.word_count()} words")

        # 3) Puzzle + search
        puzzle = solver.setup_puzzle(args.left, args.top, args.right, args.bottom)
        if args.start_word:
            solutions = solver.find_solutions_from_word(args.start_word, args.max_words)
        else:
            solutions = solver.find_solutions(args.max_words)
    except SolverError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    stats = solver.last_stats
    note = " (time limit reached)" if stats.timed_out else ""
    print(f"Found {len(solutions)} solutions in {stats.elapsed_s:.2f}s{note}")
    for rank, sol in enumerate(solutions[: args.limit], start=1):
        print(f"{rank:3d}. {sol}  [score {sol.score:.1f}, {len(sol.words)} words]")

    if args.possible:
        for letter, words in solver.possible_words_by_letter().items():
            preview = ", ".join(words[:10]) + (" ..." if len(words) > 10 else "")
            print(f"{letter}: {len(words)} words  {preview}")

    # 4) Write outputs (CSV + manifest)
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = outdir / f"solve_{run_id}.csv"
        manifest_path = outdir / f"solve_{run_id}_manifest.json"

        write_csv(solutions, str(csv_path))
        write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "search": asdict(solver.config),
            "puzzle": puzzle.named_sides(),
            "dictionaries": reports,
            "stats": asdict(stats),
            "num_solutions": len(solutions),
        }, str(manifest_path))

        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
